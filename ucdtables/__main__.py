# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import sys

from ucdtables.config import SystemConfig
from ucdtables.emitter import TypeSelector, WriteFiles
from ucdtables.parsers import DatabaseType, ParseBidiBrackets, ParseBidiMirroring, ParseBlocks, ParseCaseFolding, ParseDatabase, ParseProperties, ParseScripts
from ucdtables.ranges import Extend
from ucdtables.source import DownloadUCDFiles, ReadDataFile

# source-type => (parser, type-selector of the produced categories)
Sources = {
	'database': (ParseDatabase, TypeSelector.derived(DatabaseType)),
	'blocks': (ParseBlocks, TypeSelector.constant('blocks')),
	'scripts': (ParseScripts, TypeSelector.constant('scripts')),
	'properties': (ParseProperties, TypeSelector.constant('binary-properties')),
	'derived-core-properties': (ParseProperties, TypeSelector.constant('derived-core-properties')),
	'case-folding': (ParseCaseFolding, TypeSelector.constant('case-folding')),
	'bidi-mirroring': (ParseBidiMirroring, TypeSelector.constant('bidi-mirroring')),
	'bidi-brackets': (ParseBidiBrackets, TypeSelector.constant('bidi-brackets'))
}

def GenerateVersion(version: str, config: SystemConfig) -> dict[str, list[str]]:
	manifest: dict[str, list[str]] = {}
	for sourceType, (parse, selector) in Sources.items():
		text = ReadDataFile(version, sourceType, config)
		if text is None:
			print(f'skipping [{sourceType}] as [{config.dataPath(version, sourceType)}] does not exist')
			continue
		written = WriteFiles(version, parse(text), selector, config)
		if written is not None:
			Extend(manifest, written)
	return manifest

def main(argv: list[str]|None = None) -> int:
	argv = sys.argv[1:] if argv is None else argv
	doRefresh: bool = ('--refresh' in argv)
	doOffline: bool = ('--offline' in argv)
	versions = [arg for arg in argv if not arg.startswith('--')]
	print('Hint: use --refresh to download already cached files again')
	print('Hint: use --offline to only use the files already present in the data directory')
	if len(versions) == 0:
		print('Usage: ucd-tables [--refresh] [--offline] <version>...')
		return 1

	config = SystemConfig()
	for version in versions:
		if not doOffline:
			DownloadUCDFiles(version, config, doRefresh)
		manifest = GenerateVersion(version, config)
		for type in manifest:
			print(f'Generated [{config.outputPath(version, type)}] with [{len(manifest[type])}] categories')
	return 0

if __name__ == '__main__':
	sys.exit(main())
