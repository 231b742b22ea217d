import json

import pytest

BANKS = {
    '0001': {'code': '0001', 'name': 'みずほ', 'kana': 'ミズホ', 'hira': 'みずほ', 'roma': 'mizuho'},
    '0005': {'code': '0005', 'name': '三菱ＵＦＪ', 'kana': 'ミツビシユ－エフジエイ',
             'hira': 'みつびしゆ－えふじえい', 'roma': 'mitsubishiyu-efujiei'},
}

BRANCHES = {
    '0001': {
        '001': {'code': '001', 'name': '東京営業部', 'kana': 'トウキヨウ', 'hira': 'とうきよう', 'roma': 'toukiyou'},
        '024': {'code': '024', 'name': '新宿', 'kana': 'シンジユク', 'hira': 'しんじゆく', 'roma': 'shinjiyuku'},
    },
    '0005': {
        '001': {'code': '001', 'name': '本店', 'kana': 'ホンテン', 'hira': 'ほんてん', 'roma': 'honten'},
    },
}


def write_data(path, banks=BANKS, branches=BRANCHES):
    (path / 'branches').mkdir(parents=True, exist_ok=True)
    (path / 'banks.json').write_text(json.dumps(banks, ensure_ascii=False), encoding='utf-8')
    for code, rows in branches.items():
        (path / 'branches' / ('%s.json' % code)).write_text(json.dumps(rows, ensure_ascii=False), encoding='utf-8')
    return path


@pytest.fixture
def data_dir(tmp_path):
    return write_data(tmp_path / 'data')


@pytest.fixture
def make_data_dir(tmp_path):
    def make(banks=BANKS, branches=BRANCHES):
        return write_data(tmp_path / 'custom', banks, branches)
    return make
