from importlib.resources import files
from pathlib import Path
from typing import Optional, Union

RESOURCES_PACKAGE = "nrel.footprint.resources"


def resource_path(resources_subdirectory: str, file: Union[str, Path]) -> Path:
    """
    the location of a file shipped in nrel.footprint.resources

    :param resources_subdirectory: the subdirectory of resources, such as "defaults"
    :param file: the file name
    :return: the path to the (possibly non-existent) packaged file
    """
    return Path(str(files(RESOURCES_PACKAGE).joinpath(resources_subdirectory).joinpath(str(file))))


def construct_asset_path(
    file: Union[str, Path],
    config_directory: Optional[Union[str, Path]],
    resources_subdirectory: str,
) -> str:
    """
    constructs the path to an asset relative to the directory of the config file which referenced it.
    attempts to load at the user-provided path, then relative to the config directory, and finally
    checks the resources directory for a fallback.

    for example, with file "factors.yaml", config_directory "/home/jimbob/footprint" and resources_subdirectory
    "emission_factors", this will test "factors.yaml" then "/home/jimbob/footprint/factors.yaml" and finally
    "nrel/footprint/resources/emission_factors/factors.yaml" and return the first path where the file is found to exist.

    :param file: file we are searching for
    :param config_directory: the directory of the config file, if any
    :param resources_subdirectory: the subdirectory of resources where we also expect this could be saved
    :return: the path string if the file exists
    :raises: FileNotFoundError if asset is not found
    """
    file = Path(file)
    candidates = [file]
    if config_directory is not None:
        candidates.append(Path(config_directory).joinpath(file))
    fallback = resource_path(resources_subdirectory, file)
    candidates.append(fallback)

    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)

    locations = "".join(f" - {c} \n" for c in candidates)
    raise FileNotFoundError(
        f"could not find the file {file} in any of the following locations: \n{locations}"
    )
