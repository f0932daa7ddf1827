# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os

# ucd source types, mapped to their path relative to the versioned base url (https://www.unicode.org/Public/<version>)
DefaultFiles: dict[str, str] = {
	'database': 'ucd/UnicodeData.txt',
	'blocks': 'ucd/Blocks.txt',
	'scripts': 'ucd/Scripts.txt',
	'properties': 'ucd/PropList.txt',
	'derived-core-properties': 'ucd/DerivedCoreProperties.txt',
	'case-folding': 'ucd/CaseFolding.txt',
	'bidi-mirroring': 'ucd/BidiMirroring.txt',
	'bidi-brackets': 'ucd/BidiBrackets.txt'
}

class SystemConfig:
	def __init__(self, url: str = 'https://www.unicode.org/Public', dataRoot: str = 'data', outputRoot: str = 'output', files: dict[str, str]|None = None) -> None:
		self.url = url
		self.dataRoot = dataRoot
		self.outputRoot = outputRoot
		self.files = dict(DefaultFiles if files is None else files)
	def dataPath(self, version: str, type: str) -> str:
		return os.path.join(self.dataRoot, f'{version}-{type}.txt')
	def sourceUrl(self, version: str, type: str) -> str:
		if type not in self.files:
			raise RuntimeError(f'Unknown source type [{type}]')
		return f'{self.url}/{version}/{self.files[type]}'
	def outputPath(self, version: str, *parts: str) -> str:
		return os.path.join(self.outputRoot, f'unicode-{version}', *parts)
