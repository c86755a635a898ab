from contract_cost.calculator import CalculationResult, GroupResult, calculate, calculate_costs
from contract_cost.config.loaders import load_scenario
from contract_cost.config.models import CalculationRequest, GroupInput, build_request
from contract_cost.data.readers import parse_step_rows
from contract_cost.engines.aggregate import aggregate, sum_across_groups
from contract_cost.engines.progression import project
from contract_cost.exceptions import ContractCostError, EmptyInput, InvalidConfiguration

__all__ = [
    'CalculationRequest',
    'CalculationResult',
    'ContractCostError',
    'EmptyInput',
    'GroupInput',
    'GroupResult',
    'InvalidConfiguration',
    'aggregate',
    'build_request',
    'calculate',
    'calculate_costs',
    'load_scenario',
    'parse_step_rows',
    'project',
    'sum_across_groups',
]
