# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os

# single commonjs data-module (fully overwritten on every run, content must be pure ascii)
class GeneratedModule:
	def __init__(self, dirPath: str, name: str) -> None:
		self._path = os.path.join(dirPath, name)
		self._file = None
		self._exported = False
	def __enter__(self) -> 'GeneratedModule':
		self._file = open(self._path, mode='w', encoding='ascii', newline='')
		return self
	def __exit__(self, *args) -> None:
		if self._file is not None:
			self._file.close()
		self._file = None
		return False
	def write(self, source: str) -> None:
		self._file.write(source)
	def export(self, expression: str) -> None:
		if self._exported:
			raise RuntimeError(f'Module exported twice [{self._path}]')
		self._exported = True
		self._file.write(f'module.exports={expression}')

# create the directory (and all parents) if it does not exist yet
def MakeDirs(dirPath: str) -> str:
	os.makedirs(dirPath, exist_ok=True)
	return dirPath
