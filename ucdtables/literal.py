# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import json

# javascript source literals, written compact and pure ascii (strings use json-escapes, which are valid javascript)

def Literal(value) -> str:
	if type(value) == bool:
		return 'true' if value else 'false'
	if type(value) == int:
		return str(value)
	if type(value) == str:
		return json.dumps(value, ensure_ascii=True)
	if type(value) in (list, tuple):
		return f'[{",".join(Literal(v) for v in value)}]'
	if type(value) == dict:
		return '{' + ','.join(f'{json.dumps(str(k))}:{Literal(v)}' for k, v in value.items()) + '}'
	raise RuntimeError(f'Unsupported literal type encountered [{type(value).__name__}]')

def MapLiteral(mapping: dict) -> str:
	return f'new Map({Literal([[k, v] for k, v in mapping.items()])})'

# positional array with holes (elisions) for all indices missing in the mapping
def SparseArrayLiteral(mapping: dict[int, object]) -> str:
	if len(mapping) == 0:
		return '[]'
	if min(mapping) < 0:
		raise RuntimeError('Negative index in sparse array encountered')
	return f'[{",".join(Literal(mapping[i]) if i in mapping else "" for i in range(max(mapping) + 1))}]'
