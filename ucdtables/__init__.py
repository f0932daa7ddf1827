# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.config import SystemConfig
from ucdtables.emitter import AuxiliaryIndex, TypeSelector, WriteFiles
from ucdtables.ranges import Append, Extend, InclusiveRange, Range, Ranges
from ucdtables.regex import RegexGen
from ucdtables.source import DownloadUCDFiles, ParsedFile, ReadDataFile
