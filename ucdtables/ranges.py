# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen

# ranges are lists of range-objects, which must be sorted and must not overlap/neighbor each other if same type
#	=> use Ranges.fromRawList to sort and merge an arbitrary list of Range objects
# ranges map [first-last] to a non-empty tuple of integers
# invariant for ranges: (first >= 0) and (first <= last) and (last <= 0x10ffff)

class Range:
	RangeFirst: int = 0
	RangeLast: int = 0x10ffff

	def __init__(self, first: int, last: int, values: tuple[int]|int = 1) -> None:
		if type(values) == int:
			values = (values,)
		if first < Range.RangeFirst or last > Range.RangeLast or first > last:
			raise RuntimeError(f'Malformed range encountered [{first:04x}-{last:04x}]')
		if type(values) != tuple or len(values) == 0:
			raise RuntimeError('Malformed values encountered')
		self.first = first
		self.last = last
		self.values = values
	def __str__(self) -> str:
		return f'[{self.first:05x}-{self.last:05x}/{self.span()}] -> {self.values}'
	def __repr__(self) -> str:
		return self.__str__()
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Range):
			return NotImplemented
		return (self.first, self.last, self.values) == (other.first, other.last, other.values)
	def merge(self, other: 'Range') -> 'Range':
		if self.values != other.values:
			raise RuntimeError('Cannot merge ranges of different value')
		return Range(min(self.first, other.first), max(self.last, other.last), self.values)
	def span(self) -> int:
		return (self.last - self.first + 1)
	def neighbors(self, right: 'Range') -> bool:
		return (self.last + 1 == right.first)
	def overlap(self, other: 'Range') -> bool:
		return (self.last >= other.first and self.first <= other.last)

class Ranges:
	@staticmethod
	def _appOrMerge(out: list[Range], other: Range) -> None:
		if len(out) > 0 and (out[-1].overlap(other) or (out[-1].neighbors(other) and out[-1].values == other.values)):
			out[-1] = out[-1].merge(other)
		else:
			out.append(other)

	@staticmethod
	def fromRawList(ranges: list[Range]) -> list[Range]:
		# sort the ranges
		ranges = sorted(ranges, key=lambda r : r.first)

		# merge any neighboring/overlapping ranges of the same type
		out: list[Range] = []
		for r in ranges:
			Ranges._appOrMerge(out, r)
		return out
	@staticmethod
	def fromCodePoints(codePoints: list[int]) -> list[Range]:
		out: list[Range] = []
		for cp in sorted(set(codePoints)):
			Ranges._appOrMerge(out, Range(cp, cp))
		return out
	@staticmethod
	def toCodePoints(ranges: list[Range]) -> list[int]:
		out: list[int] = []
		for r in ranges:
			out.extend(InclusiveRange(r.first, r.last))
		return out
	@staticmethod
	def clip(ranges: list[Range], first: int, last: int) -> list[Range]:
		out: list[Range] = []
		for r in ranges:
			if r.last < first or r.first > last:
				continue
			out.append(Range(max(r.first, first), min(r.last, last), r.values))
		return out
	@staticmethod
	def complement(a: list[Range]) -> list[Range]:
		out: list[Range] = []
		lastEnd = Range.RangeFirst - 1

		# invert the range including between 0 and the range
		for i in range(len(a)):
			if a[i].first > lastEnd + 1:
				out.append(Range(lastEnd + 1, a[i].first - 1, 1))
			lastEnd = max(lastEnd, a[i].last)

		# add the final inversion up to the last code point
		if lastEnd < Range.RangeLast:
			out.append(Range(lastEnd + 1, Range.RangeLast, 1))
		return out

# inclusive, e.g. InclusiveRange(1, 3) -> [1, 2, 3]
def InclusiveRange(start: int, stop: int) -> list[int]:
	return list(range(start, stop + 1))

def Append(mapping: dict, key, value) -> None:
	if key in mapping:
		mapping[key].append(value)
	else:
		mapping[key] = [value]

def Extend(destination: dict, source: dict) -> None:
	for key in source:
		if key not in destination:
			destination[key] = []
		for item in source[key]:
			Append(destination, key, item)
