from .parser import parse_policy_text
from .run import GenerationResult, generate_policies, run_generation, run_generation_file
from .schema import PolicyConfig, PolicyEntry, TableConfig
from .sql import generate_sql, quote_ident
from .validate import PolicyConfigError, load_config, load_config_file

__all__ = [
    "GenerationResult",
    "PolicyConfig",
    "PolicyConfigError",
    "PolicyEntry",
    "TableConfig",
    "generate_policies",
    "generate_sql",
    "load_config",
    "load_config_file",
    "parse_policy_text",
    "quote_ident",
    "run_generation",
    "run_generation_file",
]
