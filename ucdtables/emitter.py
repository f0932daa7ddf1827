# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import re

from ucdtables.config import SystemConfig
from ucdtables.files import GeneratedModule, MakeDirs
from ucdtables.literal import Literal, MapLiteral, SparseArrayLiteral
from ucdtables.ranges import Append
from ucdtables.regex import RegexGen

CaseFoldingType = 'case-folding'
BidiClassesType = 'bidi-classes'
BidiMirroringType = 'bidi-mirroring'
BidiBracketsType = 'bidi-brackets'
CategoriesType = 'categories'
BidiClassPrefix = 'Bidi_'

# either a constant type-name or a function deriving the type-name from the category-name
class TypeSelector:
	def __init__(self) -> None:
		self._constant: str|None = None
		self._derive = None
	@staticmethod
	def constant(type: str) -> 'TypeSelector':
		out = TypeSelector()
		out._constant = type
		return out
	@staticmethod
	def derived(derive) -> 'TypeSelector':
		out = TypeSelector()
		out._derive = derive
		return out
	@staticmethod
	def of(selector) -> 'TypeSelector':
		if isinstance(selector, TypeSelector):
			return selector
		if type(selector) == str:
			return TypeSelector.constant(selector)
		if callable(selector):
			return TypeSelector.derived(selector)
		raise RuntimeError(f'Unsupported type-selector encountered [{selector!r}]')

	def resolve(self, category: str) -> str:
		if self._constant is not None:
			return self._constant
		return self._derive(category)

# reverse lookup of code point to owning category for the bidi-types and the two-letter general categories
class AuxiliaryIndex:
	BidiTypes: list[str] = [BidiClassesType, BidiMirroringType, BidiBracketsType]
	CategoryPattern = re.compile('^[A-Z][a-z]$')

	def __init__(self) -> None:
		self._owners: dict[str, dict[int, str]] = {}

	@staticmethod
	def tracked(type: str, category: str) -> bool:
		if type in AuxiliaryIndex.BidiTypes:
			return True
		return (type == CategoriesType and AuxiliaryIndex.CategoryPattern.match(category) is not None)

	def add(self, type: str, category: str, codePoints: list[int]) -> None:
		if type not in self._owners:
			self._owners[type] = {}
		owners = self._owners[type]
		for cp in codePoints:
			if cp in owners:
				raise RuntimeError(f'Code point already assigned [{cp:04x}] in [{type}] to [{owners[cp]}] and [{category}]')
			owners[cp] = category
	def types(self) -> list[str]:
		return list(self._owners)
	def write(self, type: str, file: GeneratedModule) -> None:
		owners = self._owners[type]
		if type in AuxiliaryIndex.BidiTypes:
			file.export(MapLiteral({ cp: owners[cp] for cp in sorted(owners) }))
			return

		# general categories are stored positionally (index = code point) and expanded by the consumer
		file.write(f'var x={SparseArrayLiteral(owners)};')
		file.export('new Map(x.entries())')

def _FoldedSymbols(mapping: dict[int, int|list[int]]) -> dict[str, str]:
	out: dict[str, str] = {}
	for cp, targets in mapping.items():
		if type(targets) == int:
			targets = [targets]
		out[chr(cp)] = ''.join(chr(t) for t in targets)
	return out

def _WriteCategory(dirPath: str, codePoints, isCaseFolding: bool) -> None:
	with GeneratedModule(dirPath, 'code-points.js') as file:
		file.export(Literal(codePoints))
	if not isCaseFolding:
		with GeneratedModule(dirPath, 'regex.js') as file:
			file.export(f'/{RegexGen(codePoints).pattern()}/')
	with GeneratedModule(dirPath, 'symbols.js') as file:
		if isCaseFolding:
			file.export(Literal(_FoldedSymbols(codePoints)))
		else:
			file.export(Literal([chr(cp) for cp in codePoints]))

# write code-points.js, regex.js and symbols.js for every category and the consolidated index.js of the auxiliary types
#	=> returns the written categories per type or None if there was nothing to write
def WriteFiles(version: str, categoryMap: dict|None, typeSelector, config: SystemConfig) -> dict[str, list[str]]|None:
	if categoryMap is None or len(categoryMap) == 0:
		return None
	selector = TypeSelector.of(typeSelector)
	dirMap: dict[str, list[str]] = {}
	auxIndex = AuxiliaryIndex()

	for category, codePoints in categoryMap.items():
		type = selector.resolve(category)
		if type == BidiClassesType and category.startswith(BidiClassPrefix):
			category = category[len(BidiClassPrefix):]

		# the auxiliary index must be filled before the mirroring categories are dropped
		if AuxiliaryIndex.tracked(type, category):
			auxIndex.add(type, category, codePoints)
		if type == BidiMirroringType:
			continue
		print(f'Writing [{type}/{category}]...')
		Append(dirMap, type, category)
		_WriteCategory(MakeDirs(config.outputPath(version, type, category)), codePoints, type == CaseFoldingType)

	# flush the consolidated index of each auxiliary type
	for type in auxIndex.types():
		if type not in dirMap:
			dirMap[type] = []
		print(f'Writing index [{type}]...')
		with GeneratedModule(MakeDirs(config.outputPath(version, type)), 'index.js') as file:
			auxIndex.write(type, file)
	return dirMap
