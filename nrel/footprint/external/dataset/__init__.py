from nrel.footprint.external.dataset.dataset_client import DatasetClient
