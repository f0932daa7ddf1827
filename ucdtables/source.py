# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os
import urllib.request

from ucdtables.config import SystemConfig
from ucdtables.files import MakeDirs
from ucdtables.ranges import Range, Ranges

# raw content of data/<version>-<type>.txt or None, if the file does not exist
def ReadDataFile(version: str, type: str, config: SystemConfig) -> str|None:
	path = config.dataPath(version, type)
	if not os.path.isfile(path):
		return None
	print(f'Reading [{path}]...')
	with open(path, 'r', encoding='utf-8') as file:
		return file.read()

# download all configured files of the ucd for the given version (unicode character database: https://www.unicode.org/Public/<version>/ucd)
def DownloadUCDFiles(version: str, config: SystemConfig, refreshFiles: bool) -> dict[str, str]:
	MakeDirs(config.dataRoot)

	# download all of the files (only if they should either be refreshed, or do not exist yet)
	mapping = {}
	for type in config.files:
		url, path = config.sourceUrl(version, type), config.dataPath(version, type)
		mapping[type] = path

		if not refreshFiles and os.path.isfile(path):
			continue
		print(f'downloading [{url}] to [{path}]...')
		urllib.request.urlretrieve(url, path)
	return mapping

class ParsedFile:
	def _parseLine(self, line: str) -> list|None:
		missing = ('@missing:' in line)

		# check if this is a missing line
		if missing:
			_, line = line.split('@missing:')

		# remove any comments and split the line and strip all entries
		fields = [s.strip() for s in line.split('#')[0].split(';')]

		# validate the field count
		if fields == ['']:
			return None
		if len(fields) < 2:
			raise RuntimeError(f'Line with an invalid field count encountered [{fields[0]}]')
		cp, fields = fields[0], fields[1:]

		# expand the unicode range
		try:
			if '..' not in cp:
				return [missing, int(cp, 16), int(cp, 16), fields]
			begin, last = cp.split('..')
			return [missing, int(begin, 16), int(last, 16), fields]
		except ValueError:
			raise RuntimeError(f'Malformed code point encountered [{cp}]')
	def _parseText(self, text: str, legacyRanges: bool) -> None:
		legacyState = None
		for line in text.splitlines():
			# parse the line
			parsed = self._parseLine(line)
			if parsed is None:
				continue
			missing, begin, last, fields = parsed

			# check if a legacy range has been started
			if legacyState is not None:
				if len(fields) == 0 or ', Last>' not in fields[0] or fields[0][:-7] != legacyState[1] or fields[1:] != legacyState[2:]:
					raise RuntimeError(f'Legacy range not closed properly [{begin:06x}]')
				begin = legacyState[0]
				fields = [fields[0][1:-7]] + fields[1:]
				legacyState = None
			elif legacyRanges and ', First>' in fields[0]:
				legacyState = [begin, fields[0][:-8]] + fields[1:]
				continue

			# check if the line can be ignored, because its empty (i.e. only a comment)
			if len(fields) < 1:
				continue

			# write the value to the output
			self._parsed.append((begin, last, missing, fields))
		if legacyState is not None:
			raise RuntimeError(f'Half-open legacy state encountered [{legacyState[0]:06x}]')
	def __init__(self, text: str, legacyRanges: bool = False) -> None:
		self._parsed: list[tuple[int, int, bool, list[str]]] = []
		self._parseText(text, legacyRanges)
	def lines(self, ignoreMissing: bool = True) -> list[tuple[int, int, list[str]]]:
		return [(begin, last, fields) for (begin, last, missing, fields) in self._parsed if not (missing and ignoreMissing)]
	def values(self, assignValue) -> dict[str, list[Range]]:
		ranges: dict[str, list[Range]] = {}

		# iterate over the parsed lines and group them by the assigned category-name
		for (begin, last, missing, fields) in self._parsed:
			if missing:
				continue
			name = assignValue(fields)
			if name is None:
				continue
			if name not in ranges:
				ranges[name] = []
			ranges[name].append(Range(begin, last))

		# sanitize and cleanup the found ranges
		return { name: Ranges.fromRawList(ranges[name]) for name in ranges }
