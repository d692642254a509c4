"""
Property trees.

A property tree is a dict mapping the sub-phrase names TIME_PROPS,
SPACE_PROPS, SPECTRAL_PROPS and REDSHIFT_PROPS to dicts of the sub-phrase
fields (ID, FRAME, CENTRE...).  Values are the strings as they were read
(vectors are space-separated words).  The writer uses them to find out
what the original formatting of numbers was.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import re

from stcscodec.common import *


def makePropertyTree(subphraseMaps):
	"""returns a property tree from a dict of sub-phrase maps, leaving
	out empty ones.
	"""
	tree = {}
	for key in subphraseKeys:
		if subphraseMaps.get(key):
			tree[key] = subphraseMaps[key]
	return tree


def isPropertyTree(obj):
	"""returns True if obj looks like a property tree.
	"""
	return isinstance(obj, dict) and any(key in obj for key in subphraseKeys)


def putString(props, key, value, default, storeDefaults):
	"""sets key in props to value unless value is default and storeDefaults
	is false, in which case key is removed.
	"""
	if value==default and not storeDefaults:
		props.pop(key, None)
	else:
		props[key] = value


def putFloat(props, key, value, default, storeDefaults):
	"""works like putString for floats.

	None values leave props unchanged.
	"""
	if value is None:
		return
	if value==default and not storeDefaults:
		props.pop(key, None)
	else:
		props[key] = "%.15g"%value


_numberPartRE = re.compile(r"[^\s]+")

def _analyzeNumber(word):
	"""returns a triple of (digits before point, digits after point,
	has exponent) for a numeric literal.

	Characters after an exponent marker are not counted.
	"""
	before = after = 0
	seenDot = False
	for c in word:
		if c in "eE":
			return before, after, True
		elif c==".":
			seenDot = True
		elif c.isdigit():
			if seenDot:
				after += 1
			else:
				before += 1
	return before, after, False


def getFmt(props, key, index=0, defDigits=7):
	"""returns a %-format for writing the index-th value of the property
	key in the same style as the value stored in props.

	If there is no index-th word, the first word determines the format.
	If the key is missing, the result is a %g format with defDigits
	significant digits.

	>>> getFmt({"RADIUS": "0.5"}, "RADIUS")
	'%.1f'
	>>> getFmt({"CENTRE": "10 20.125"}, "CENTRE", 1)
	'%.3f'
	>>> getFmt({"CENTRE": "10.0 20.125"}, "CENTRE", 2)
	'%.1f'
	>>> getFmt({"LOLIMIT": "1.5e9"}, "LOLIMIT")
	'%.2g'
	>>> getFmt({}, "RADIUS", defDigits=9)
	'%.9g'
	"""
	if props is None or props.get(key) is None:
		return "%%.%dg"%defDigits
	words = _numberPartRE.findall(props[key])
	if not words:
		return "%%.%dg"%defDigits
	if index<len(words):
		word = words[index]
	else:
		word = words[0]
	before, after, hasExp = _analyzeNumber(word)
	if hasExp:
		return "%%.%dg"%max(1, before+after)
	return "%%.%df"%after


def formatValues(fmt, values):
	"""returns values formatted with fmt and joined by blanks.

	fmt can be a single format or a sequence of formats, one per value.
	"""
	if isinstance(fmt, str):
		fmt = [fmt]*len(values)
	return " ".join(f%v for f, v in zip(fmt, values))


def _test():
	import doctest
	from stcscodec import props
	doctest.testmod(props)

if __name__=="__main__":
	_test()
