import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Union

from .errors import DataSourceError, NotFoundError, ParseError
from .records import Bank, Branch, is_valid_bank_code, is_valid_branch_code

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / 'data'
BANKS_FILE = 'banks.json'
BRANCHES_DIR = 'branches'
ENV_DATA_DIR = 'ZENGIN_DATA_DIR'

RECORD_FIELDS = ('code', 'name', 'kana', 'hira', 'roma')
MISSING_BRANCHES = ('error', 'empty')


def _parse(text: str, record_cls, is_valid_code, source: str) -> dict:
    try:
        doc = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ParseError('%s: malformed JSON: %s' % (source, e)) from e
    if not isinstance(doc, dict):
        raise ParseError('%s: expected a JSON object, got %s' % (source, type(doc).__name__))

    records = {}
    for key, row in doc.items():
        if not is_valid_code(key):
            raise ParseError('%s: %r is not a valid code' % (source, key))
        if not isinstance(row, dict):
            raise ParseError('%s: record %r is not an object' % (source, key))
        values = []
        for name in RECORD_FIELDS:
            if name not in row:
                raise ParseError('%s: record %r has no %r field' % (source, key, name))
            if not isinstance(row[name], str):
                raise ParseError('%s: field %r of record %r must be a string' % (source, name, key))
            values.append(row[name])
        if row['code'] != key:
            raise ParseError('%s: record %r has code %r' % (source, key, row['code']))
        records[key] = record_cls(*values)
    return records


def parse_banks(text: str, source: str = BANKS_FILE) -> Dict[str, Bank]:
    """Parse a bank index document. The returned banks have no branches.

    Every key must be a 4-digit bank code equal to its record's ``code``.
    """
    return _parse(text, Bank, is_valid_bank_code, source)


def parse_branches(text: str, source: str = 'branches') -> Dict[str, Branch]:
    return _parse(text, Branch, is_valid_branch_code, source)


def load_banks(banks_source: str, branch_source: Callable[[str], str],
               missing_branches: str = 'error') -> Mapping[str, Bank]:
    """Build the bank collection from a bank index and a per-bank branch index.

    ``branch_source`` is called with each bank code and returns that bank's
    branch index document. It signals an absent document by raising
    NotFoundError. With ``missing_branches='empty'`` such banks get an empty
    branch set instead of aborting the load.
    """
    if missing_branches not in MISSING_BRANCHES:
        raise ValueError('missing_branches must be one of %s, not %r' % (', '.join(MISSING_BRANCHES), missing_branches))

    banks = {}
    for code, bank in parse_banks(banks_source).items():
        try:
            text = branch_source(code)
        except NotFoundError:
            if missing_branches == 'error':
                raise
            logger.warning('no branch index for bank %s, loading it without branches', code)
            branches = {}
        else:
            branches = parse_branches(text, source='branches of %s' % code)
        banks[code] = Bank(bank.code, bank.name, bank.kana, bank.hira, bank.roma,
                           branches=MappingProxyType(branches))

    logger.debug('loaded %d banks, %d branches', len(banks), sum(len(b.branches) for b in banks.values()))
    return MappingProxyType(banks)


def resolve_data_dir(data_dir: Union[str, Path, None] = None) -> Path:
    if data_dir is None:
        data_dir = os.environ.get(ENV_DATA_DIR) or DATA_DIR
    return Path(data_dir)


def read_data_file(path: Path) -> str:
    try:
        with open(path, encoding='utf-8') as fd:
            return fd.read()
    except FileNotFoundError as e:
        raise NotFoundError('%s does not exist' % path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError('cannot read %s: %s' % (path, e)) from e


def load_from_dir(data_dir: Union[str, Path, None] = None, missing_branches: str = 'error') -> Mapping[str, Bank]:
    data_dir = resolve_data_dir(data_dir)
    logger.debug('loading zengin data from %s', data_dir)

    def branch_source(code):
        return read_data_file(data_dir / BRANCHES_DIR / ('%s.json' % code))

    return load_banks(read_data_file(data_dir / BANKS_FILE), branch_source, missing_branches=missing_branches)
