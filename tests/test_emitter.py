# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import json
import os

import pytest

from ucdtables.config import SystemConfig
from ucdtables.emitter import AuxiliaryIndex, TypeSelector, WriteFiles

Version = '15.0.0'
Export = 'module.exports='


@pytest.fixture
def config(tmp_path):
	return SystemConfig(dataRoot=str(tmp_path / 'data'), outputRoot=str(tmp_path / 'output'))


def _read(config, *parts):
	with open(config.outputPath(Version, *parts), 'r', encoding='ascii') as file:
		return file.read()


def _exported(config, *parts):
	content = _read(config, *parts)
	assert content.startswith(Export)
	return json.loads(content[len(Export):])


def _category_index(config):
	content = _read(config, 'categories', 'index.js')
	prefix, suffix = 'var x=[', '];module.exports=new Map(x.entries())'
	assert content.startswith(prefix) and content.endswith(suffix)
	items = content[len(prefix):-len(suffix)].split(',')
	return {cp: json.loads(item) for cp, item in enumerate(items) if item != ''}


def _bidi_index(config, type):
	content = _read(config, type, 'index.js')
	prefix, suffix = 'module.exports=new Map(', ')'
	assert content.startswith(prefix) and content.endswith(suffix)
	return {cp: label for cp, label in json.loads(content[len(prefix):-len(suffix)])}


def _all_files(root):
	out = {}
	for dirPath, _, names in os.walk(root):
		for name in names:
			path = os.path.join(dirPath, name)
			with open(path, 'rb') as file:
				out[os.path.relpath(path, root)] = file.read()
	return out


def test_general_categories(config):
	written = WriteFiles(Version, {'Lu': [65, 66], 'Ll': [97, 98]}, 'categories', config)
	assert written == {'categories': ['Lu', 'Ll']}
	assert _read(config, 'categories', 'Lu', 'code-points.js') == 'module.exports=[65,66]'
	assert _read(config, 'categories', 'Lu', 'symbols.js') == 'module.exports=["A","B"]'
	assert _read(config, 'categories', 'Lu', 'regex.js') == 'module.exports=/[AB]/'
	assert _read(config, 'categories', 'Ll', 'regex.js') == 'module.exports=/[ab]/'
	assert _category_index(config) == {65: 'Lu', 66: 'Lu', 97: 'Ll', 98: 'Ll'}


def test_category_index_only_for_two_letter_categories(config):
	written = WriteFiles(Version, {'Lu': [65], 'L': [65, 97], 'LC': [65, 97], 'Ll': [97]}, 'categories', config)
	assert written == {'categories': ['Lu', 'L', 'LC', 'Ll']}
	assert _category_index(config) == {65: 'Lu', 97: 'Ll'}


def test_no_index_for_other_types(config):
	WriteFiles(Version, {'Latin': [65, 66], 'Greek': [0x3b1]}, 'scripts', config)
	assert os.path.isfile(config.outputPath(Version, 'scripts', 'Greek', 'regex.js'))
	assert not os.path.exists(config.outputPath(Version, 'scripts', 'index.js'))


def test_bidi_classes_strip_prefix(config):
	written = WriteFiles(Version, {'Bidi_L': [66, 65], 'Bidi_R': [0x5d0]}, 'bidi-classes', config)
	assert written == {'bidi-classes': ['L', 'R']}
	assert _exported(config, 'bidi-classes', 'L', 'code-points.js') == [66, 65]
	assert _exported(config, 'bidi-classes', 'R', 'symbols.js') == ['\u05d0']
	assert _read(config, 'bidi-classes', 'index.js') == 'module.exports=new Map([[65,"L"],[66,"L"],[1488,"R"]])'


def test_duplicate_auxiliary_owner(config):
	with pytest.raises(RuntimeError):
		WriteFiles(Version, {'Bidi_L': [65, 66], 'Bidi_R': [66]}, 'bidi-classes', config)
	with pytest.raises(RuntimeError):
		WriteFiles(Version, {'Lu': [65], 'Ll': [65]}, 'categories', config)


def test_bidi_mirroring_is_aggregated_only(config):
	written = WriteFiles(Version, {')': [0x28], '(': [0x29]}, 'bidi-mirroring', config)
	assert written == {'bidi-mirroring': []}
	assert os.listdir(config.outputPath(Version, 'bidi-mirroring')) == ['index.js']
	assert _bidi_index(config, 'bidi-mirroring') == {0x28: ')', 0x29: '('}


def test_bidi_brackets(config):
	written = WriteFiles(Version, {'Open': [0x28, 0x5b], 'Close': [0x29]}, 'bidi-brackets', config)
	assert written == {'bidi-brackets': ['Open', 'Close']}
	assert _read(config, 'bidi-brackets', 'Open', 'regex.js') == 'module.exports=/[\\(\\[]/'
	assert _bidi_index(config, 'bidi-brackets') == {0x28: 'Open', 0x29: 'Close', 0x5b: 'Open'}


def test_case_folding(config):
	written = WriteFiles(Version, {'C': {0x41: 0x61}, 'F': {0xdf: [0x73, 0x73], 0x130: [0x69, 0x307]}}, 'case-folding', config)
	assert written == {'case-folding': ['C', 'F']}
	assert _read(config, 'case-folding', 'C', 'code-points.js') == 'module.exports={"65":97}'
	assert _read(config, 'case-folding', 'C', 'symbols.js') == 'module.exports={"A":"a"}'
	assert _exported(config, 'case-folding', 'F', 'symbols.js') == {'\xdf': 'ss', '\u0130': 'i\u0307'}
	assert not os.path.exists(config.outputPath(Version, 'case-folding', 'C', 'regex.js'))
	assert not os.path.exists(config.outputPath(Version, 'case-folding', 'index.js'))


def test_derived_type_selector(config):
	categoryMap = {'Lu': [65], 'Bidi_L': [65], 'Latin': [65]}
	types = {'Lu': 'categories', 'Bidi_L': 'bidi-classes', 'Latin': 'scripts'}
	written = WriteFiles(Version, categoryMap, lambda name: types[name], config)
	assert written == {'categories': ['Lu'], 'bidi-classes': ['L'], 'scripts': ['Latin']}
	assert _category_index(config) == {65: 'Lu'}
	assert _bidi_index(config, 'bidi-classes') == {65: 'L'}


def test_type_selector():
	assert TypeSelector.of('scripts').resolve('Latin') == 'scripts'
	assert TypeSelector.of(str.lower).resolve('Latin') == 'latin'
	selector = TypeSelector.constant('blocks')
	assert TypeSelector.of(selector) is selector
	with pytest.raises(RuntimeError):
		TypeSelector.of(42)


def test_auxiliary_index_tracking():
	assert AuxiliaryIndex.tracked('bidi-mirroring', ')')
	assert AuxiliaryIndex.tracked('categories', 'Lu')
	assert not AuxiliaryIndex.tracked('categories', 'LC')
	assert not AuxiliaryIndex.tracked('categories', 'L')
	assert not AuxiliaryIndex.tracked('scripts', 'Lu')


def test_empty_input(config):
	assert WriteFiles(Version, None, 'categories', config) is None
	assert WriteFiles(Version, {}, 'categories', config) is None
	assert not os.path.exists(config.outputRoot)


def test_code_points_match_symbols(config):
	categoryMap = {'So': [0xa9, 0x1f600, 0x1f601], 'Zs': [0x20, 0x3000], 'Cs': [0xd800]}
	WriteFiles(Version, categoryMap, 'categories', config)
	for category in categoryMap:
		codePoints = _exported(config, 'categories', category, 'code-points.js')
		symbols = _exported(config, 'categories', category, 'symbols.js')
		assert [chr(cp) for cp in codePoints] == symbols
	assert _read(config, 'categories', 'So', 'regex.js') == 'module.exports=/\\xA9|\\uD83D[\\uDE00\\uDE01]/'


def test_rerun_is_byte_identical(config):
	categoryMap = {'Lu': [65, 66], 'Ll': [97, 98], 'So': [0x1f600]}
	WriteFiles(Version, categoryMap, 'categories', config)
	WriteFiles(Version, {'Bidi_L': [65, 66]}, 'bidi-classes', config)
	first = _all_files(config.outputRoot)
	WriteFiles(Version, categoryMap, 'categories', config)
	WriteFiles(Version, {'Bidi_L': [65, 66]}, 'bidi-classes', config)
	assert _all_files(config.outputRoot) == first
	assert len(first) == 3 * 3 + 1 + 3 + 1
