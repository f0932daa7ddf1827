# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.ranges import Range, Ranges

# generates javascript regular expression source (without the u-flag) matching exactly one character of a set
#	=> astral characters are matched as utf-16 surrogate pairs, lone surrogates are guarded to not match halves of pairs
class RegexGen:
	HighFirst: int = 0xd800
	HighLast: int = 0xdbff
	LowFirst: int = 0xdc00
	LowLast: int = 0xdfff
	AstralFirst: int = 0x10000

	LoneHighSuffix: str = '(?![\\uDC00-\\uDFFF])'
	LoneLowPrefix: str = '(?:[^\\uD800-\\uDBFF]|^)'
	NeverMatch: str = '[]'

	SyntaxChars: str = '\\^$.|?*+()[]{}/-'
	NamedEscapes: dict[int, str] = { 0x09: '\\t', 0x0a: '\\n', 0x0b: '\\v', 0x0c: '\\f', 0x0d: '\\r' }

	def __init__(self, codePoints: list[int]) -> None:
		self._ranges = Ranges.fromCodePoints(codePoints)

	@staticmethod
	def escape(cp: int) -> str:
		if cp in RegexGen.NamedEscapes:
			return RegexGen.NamedEscapes[cp]
		if cp >= 0x20 and cp <= 0x7e:
			c = chr(cp)
			return f'\\{c}' if c in RegexGen.SyntaxChars else c
		if cp <= 0xff:
			return f'\\x{cp:02X}'
		if cp <= 0xffff:
			return f'\\u{cp:04X}'
		raise RuntimeError(f'Code point cannot be escaped as a single utf-16 unit [{cp:06x}]')
	@staticmethod
	def characterClass(ranges: list[Range]) -> str:
		if len(ranges) == 0:
			return RegexGen.NeverMatch
		if len(ranges) == 1 and ranges[0].span() == 1:
			return RegexGen.escape(ranges[0].first)

		# write single units and pairs out directly and everything else as a range
		out = ''
		for r in ranges:
			if r.span() == 1:
				out += RegexGen.escape(r.first)
			elif r.span() == 2:
				out += RegexGen.escape(r.first) + RegexGen.escape(r.last)
			else:
				out += f'{RegexGen.escape(r.first)}-{RegexGen.escape(r.last)}'
		return f'[{out}]'
	@staticmethod
	def surrogates(cp: int) -> tuple[int, int]:
		cp -= RegexGen.AstralFirst
		return (RegexGen.HighFirst + (cp >> 10), RegexGen.LowFirst + (cp & 0x3ff))
	@staticmethod
	def surrogateMappings(astral: list[Range]) -> list[tuple[Range, list[Range]]]:
		lows: dict[int, list[Range]] = {}

		# distribute the astral ranges onto the low surrogate ranges of each high surrogate
		for r in astral:
			firstHigh, firstLow = RegexGen.surrogates(r.first)
			lastHigh, lastLow = RegexGen.surrogates(r.last)
			for high in range(firstHigh, lastHigh + 1):
				low = Range(firstLow if high == firstHigh else RegexGen.LowFirst, lastLow if high == lastHigh else RegexGen.LowLast)
				if high not in lows:
					lows[high] = []
				lows[high].append(low)

		# merge neighboring high surrogates, which share the same set of low surrogates
		out: list[tuple[Range, list[Range]]] = []
		for high in sorted(lows):
			if len(out) > 0 and out[-1][0].last + 1 == high and out[-1][1] == lows[high]:
				out[-1] = (Range(out[-1][0].first, high), out[-1][1])
			else:
				out.append((Range(high, high), lows[high]))
		return out

	def pattern(self) -> str:
		bmp = Ranges.clip(self._ranges, 0, RegexGen.HighFirst - 1) + Ranges.clip(self._ranges, RegexGen.LowLast + 1, RegexGen.AstralFirst - 1)
		loneHigh = Ranges.clip(self._ranges, RegexGen.HighFirst, RegexGen.HighLast)
		loneLow = Ranges.clip(self._ranges, RegexGen.LowFirst, RegexGen.LowLast)
		astral = Ranges.clip(self._ranges, RegexGen.AstralFirst, Range.RangeLast)

		# collect the separate alternatives
		parts: list[str] = []
		if len(bmp) > 0:
			parts.append(RegexGen.characterClass(bmp))
		for high, lows in RegexGen.surrogateMappings(astral):
			parts.append(RegexGen.characterClass([high]) + RegexGen.characterClass(lows))
		if len(loneHigh) > 0:
			parts.append(RegexGen.characterClass(loneHigh) + RegexGen.LoneHighSuffix)
		if len(loneLow) > 0:
			parts.append(RegexGen.LoneLowPrefix + RegexGen.characterClass(loneLow))

		if len(parts) == 0:
			return RegexGen.NeverMatch
		return '|'.join(parts)
