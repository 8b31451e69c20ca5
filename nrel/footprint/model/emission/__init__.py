from nrel.footprint.model.emission.emission_calculator import EmissionCalculator
from nrel.footprint.model.emission.emission_factor_table import EmissionFactorTable
