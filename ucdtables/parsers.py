# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.ranges import Extend, Range, Ranges
from ucdtables.source import ParsedFile

# general category groups (https://www.unicode.org/reports/tr44/#GC_Values_Table)
CategoryGroups: dict[str, list[str]] = {
	'C': ['Cc', 'Cf', 'Cs', 'Co', 'Cn'],
	'L': ['Lu', 'Ll', 'Lt', 'Lm', 'Lo'],
	'LC': ['Lu', 'Ll', 'Lt'],
	'M': ['Mn', 'Mc', 'Me'],
	'N': ['Nd', 'Nl', 'No'],
	'P': ['Pc', 'Pd', 'Ps', 'Pe', 'Pi', 'Pf', 'Po'],
	'S': ['Sm', 'Sc', 'Sk', 'So'],
	'Z': ['Zs', 'Zl', 'Zp']
}
CaseFoldingStatus: list[str] = ['C', 'F', 'S', 'T']

def _CodePointMap(ranges: dict[str, list[Range]]) -> dict[str, list[int]]:
	return { name: Ranges.toCodePoints(ranges[name]) for name in sorted(ranges) }

# UnicodeData.txt: General_Category including unassigned code points [Cn] and the category groups
def ParseCategories(text: str) -> dict[str, list[int]]:
	ranges = ParsedFile(text, True).values(lambda fs: fs[1] if len(fs) > 1 and fs[1] != '' else None)

	# everything not listed is unassigned
	assigned: list[Range] = []
	for name in ranges:
		assigned += ranges[name]
	ranges['Cn'] = Ranges.complement(Ranges.fromRawList(assigned))

	# construct the group categories out of their members
	for group, members in CategoryGroups.items():
		merged: list[Range] = []
		for name in members:
			merged += ranges.get(name, [])
		if len(merged) > 0:
			ranges[group] = Ranges.fromRawList(merged)
	return _CodePointMap(ranges)

# UnicodeData.txt: Bidi_Class of all listed code points (prefixed with [Bidi_])
def ParseBidiClasses(text: str) -> dict[str, list[int]]:
	return _CodePointMap(ParsedFile(text, True).values(lambda fs: f'Bidi_{fs[3]}' if len(fs) > 3 and fs[3] != '' else None))

# BidiMirroring.txt: the mirrored character is the category of all code points mirroring to it
def ParseBidiMirroring(text: str) -> dict[str, list[int]]:
	out: dict[str, list[int]] = {}
	for (begin, last, fields) in ParsedFile(text).lines():
		name = chr(int(fields[0], 16))
		if name not in out:
			out[name] = []
		out[name] += list(range(begin, last + 1))
	return out

# BidiBrackets.txt: Bidi_Paired_Bracket_Type [o] or [c]
def ParseBidiBrackets(text: str) -> dict[str, list[int]]:
	bracketTypes = { 'o': 'Open', 'c': 'Close' }

	def assign(fs: list[str]) -> str:
		if len(fs) < 2 or fs[1] not in bracketTypes:
			raise RuntimeError(f'Unknown bracket type encountered [{fs}]')
		return bracketTypes[fs[1]]
	return _CodePointMap(ParsedFile(text).values(assign))

# CaseFolding.txt: one category per status, mapping each code point to its folded code point(s)
def ParseCaseFolding(text: str) -> dict[str, dict[int, int|list[int]]]:
	out: dict[str, dict[int, int|list[int]]] = {}
	for (begin, last, fields) in ParsedFile(text).lines():
		if len(fields) < 2 or fields[0] not in CaseFoldingStatus:
			raise RuntimeError(f'Unsupported status for case-folding encountered [{begin:04x}]')
		if begin != last:
			raise RuntimeError(f'Unexpected range in case-folding encountered [{begin:04x}]')
		values = [int(u, 16) for u in fields[1].split()]
		if fields[0] not in out:
			out[fields[0]] = {}
		out[fields[0]][begin] = values[0] if len(values) == 1 else values
	return { status: out[status] for status in CaseFoldingStatus if status in out }

# PropList.txt, DerivedCoreProperties.txt: binary properties only (enumerated ones carry a value-field)
def ParseProperties(text: str) -> dict[str, list[int]]:
	return _CodePointMap(ParsedFile(text).values(lambda fs: fs[0] if len(fs) == 1 or fs[1] == '' else None))

def ParseScripts(text: str) -> dict[str, list[int]]:
	return _CodePointMap(ParsedFile(text).values(lambda fs: fs[0]))

def ParseBlocks(text: str) -> dict[str, list[int]]:
	return _CodePointMap(ParsedFile(text).values(lambda fs: fs[0].replace(' ', '_').replace('-', '_')))

# UnicodeData.txt: general categories and bidi classes combined into one heterogeneous map
def ParseDatabase(text: str) -> dict[str, list[int]]:
	out = ParseCategories(text)
	Extend(out, ParseBidiClasses(text))
	return out

def DatabaseType(category: str) -> str:
	return 'bidi-classes' if category.startswith('Bidi_') else 'categories'
