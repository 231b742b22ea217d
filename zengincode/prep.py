"""Build the zengincode data files from the Zengin bank/branch master CSV.

    python -m zengincode.prep raw/ginkositen.utf8.csv zengincode/data
"""
import argparse
import json
import logging
from csv import DictReader
from pathlib import Path

from mojimoji import han_to_zen, zen_to_han

from .loader import BANKS_FILE, BRANCHES_DIR, DATA_DIR

logger = logging.getLogger(__name__)

FIELDS = [
    'bank_code',
    'branch_code',
    'han_kana',
    'name',
    'branch_flag',  # 名称区分 １：銀行名称 ２：支店名称
    'sub_branch'  # 出張所フラグ １：重複なし or 母店 ２：出張所
]

hira_table = str.maketrans(
    ''.join(chr(c) for c in range(0x30A1, 0x30F7)),
    ''.join(chr(c) for c in range(0x3041, 0x3097)))

ROMA = dict(zip(
    'アイウエオカキクケコガギグゲゴサシスセソザジズゼゾタチツテトダヂヅデド'
    'ナニヌネノハヒフヘホバビブベボパピプペポマミムメモヤユヨラリルレロワヰヱヲンヴ'
    'ァィゥェォャュョヮ',
    ['a', 'i', 'u', 'e', 'o', 'ka', 'ki', 'ku', 'ke', 'ko', 'ga', 'gi', 'gu', 'ge', 'go',
     'sa', 'shi', 'su', 'se', 'so', 'za', 'ji', 'zu', 'ze', 'zo',
     'ta', 'chi', 'tsu', 'te', 'to', 'da', 'di', 'du', 'de', 'do',
     'na', 'ni', 'nu', 'ne', 'no', 'ha', 'hi', 'fu', 'he', 'ho',
     'ba', 'bi', 'bu', 'be', 'bo', 'pa', 'pi', 'pu', 'pe', 'po',
     'ma', 'mi', 'mu', 'me', 'mo', 'ya', 'yu', 'yo', 'ra', 'ri', 'ru', 're', 'ro',
     'wa', 'i', 'e', 'o', 'n', 'vu',
     'a', 'i', 'u', 'e', 'o', 'ya', 'yu', 'yo', 'wa']))

LONG_VOWEL = 'ー－‐'
SMALL_Y = 'ャュョ'


def kana_to_hira(kana: str) -> str:
    return kana.translate(hira_table)


def kana_to_roma(kana: str) -> str:
    """Romanize full-width katakana one kana at a time.

    Zengin kana has no small ya/yu/yo, so トウキヨウ gives toukiyou. Small
    kana, where present, form digraphs (キョ -> kyo) and ッ doubles the next
    consonant.
    """
    out = []
    double = False
    for c in kana:
        if c == 'ッ':
            double = True
            continue
        if c in SMALL_Y and out and out[-1].endswith('i') and len(out[-1]) > 1:
            base = out.pop()[:-1]
            vowel = ROMA[c][-1]
            out.append(base + vowel if base in ('sh', 'ch', 'j') else base + 'y' + vowel)
            continue
        if c in LONG_VOWEL:
            r = '-'
        elif c in ROMA:
            r = ROMA[c]
        else:
            r = zen_to_han(c).lower()
        if double and r[0] in 'bcdfghjkmprstvwz':
            r = ('t' if r.startswith('ch') else r[0]) + r
        double = False
        out.append(r)
    return ''.join(out)


def make_record(code: str, row: dict) -> dict:
    kana = han_to_zen(row['han_kana'].strip())
    return {
        'code': code,
        'name': row['name'].strip(),
        'kana': kana,
        'hira': kana_to_hira(kana),
        'roma': kana_to_roma(kana),
    }


def build_data(bank_csv, encoding='utf-8'):
    data = {}
    with open(bank_csv, 'rt', encoding=encoding, newline='') as fd:
        for row in DictReader(fd, FIELDS):
            bank_code = row['bank_code'].strip()
            if row['branch_flag'].strip() == '1':
                bank = make_record(bank_code, row)
                bank['branches'] = {}
                data[bank_code] = bank
                continue

            branches = data[bank_code]['branches']
            branch_code = row['branch_code'].strip()
            if row['sub_branch'].strip() != '1' and branch_code in branches:
                # 出張所 shares its 母店's code
                logger.debug('skip sub-branch %s %s-%s', row['name'].strip(), bank_code, branch_code)
                continue
            branches[branch_code] = make_record(branch_code, row)

    logger.info('read %d banks from %s', len(data), bank_csv)
    return data


def write_data(data, out_dir=DATA_DIR):
    out_dir = Path(out_dir)
    (out_dir / BRANCHES_DIR).mkdir(parents=True, exist_ok=True)

    banks = {code: {k: v for k, v in bank.items() if k != 'branches'} for code, bank in data.items()}
    with open(out_dir / BANKS_FILE, 'w', encoding='utf-8') as outfile:
        outfile.write(json.dumps(banks, ensure_ascii=False, indent=2))

    for code, bank in data.items():
        with open(out_dir / BRANCHES_DIR / ('%s.json' % code), 'w', encoding='utf-8') as outfile:
            outfile.write(json.dumps(bank['branches'], ensure_ascii=False, indent=2))
    logger.info('wrote %d banks to %s', len(banks), out_dir)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='python -m zengincode.prep', description=__doc__.splitlines()[0])
    parser.add_argument('csv', help='Zengin master CSV (ginkositen layout)')
    parser.add_argument('out_dir', nargs='?', default=str(DATA_DIR), help='output directory (default: %(default)s)')
    parser.add_argument('--encoding', default='utf-8', help='CSV encoding (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    write_data(build_data(args.csv, encoding=args.encoding), args.out_dir)


if __name__ == '__main__':
    main()
