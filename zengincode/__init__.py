from functools import lru_cache

from .errors import DataSourceError, NotFoundError, ParseError, PatternError, ZenginError
from .loader import load_banks, load_from_dir, parse_banks, parse_branches
from .records import Bank, Branch
from .zengin import Zengin

__all__ = [
    'Bank', 'Branch', 'Zengin',
    'ZenginError', 'DataSourceError', 'NotFoundError', 'ParseError', 'PatternError',
    'load_banks', 'load_from_dir', 'parse_banks', 'parse_branches',
    'default', 'get_bank', 'get_branch', 'find_banks_by',
]


@lru_cache(maxsize=None)
def default() -> Zengin:
    """The process-wide dataset, loaded on first use."""
    return Zengin.load()


def get_bank(code):
    return default().get_bank(code)


def get_branch(bank_code, branch_code):
    return default().get_branch(bank_code, branch_code)


def find_banks_by(key, pattern):
    return default().find_banks_by(key, pattern)
