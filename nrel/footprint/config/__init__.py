from nrel.footprint.config.footprint_config import FootprintConfig
