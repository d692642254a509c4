"""
Splitting STC-S text into words.

A WordContext pulls lines from a line source, splits them at whitespace
and hands out one word at a time.  It keeps the last few words it handed
out for use in error messages.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import collections


NEWORD = 10


def makeLineSource(source):
	"""returns a callable returning the next line of source or None at
	the end of the input.

	source can be a string (which is split into lines), a file-like object,
	an iterable of lines, or a callable that already behaves as required.
	"""
	if callable(source) and not hasattr(source, "readline"):
		return source
	if isinstance(source, str):
		source = source.splitlines()
	lines = iter(source)
	def nextLine():
		return next(lines, None)
	return nextLine


class WordContext(object):
	"""is a stream of words from a line source.

	nextWord() returns the next word.  At the end of the input, it returns
	an empty string unless done is set, in which case it returns None.
	Each word read from the source is recorded in a ring of NEWORD entries
	rendered by getContextSnippet().
	"""
	def __init__(self, source):
		self.getLine = makeLineSource(source)
		self.history = collections.deque(maxlen=NEWORD)
		self.pending = collections.deque()
		self.exhausted = False
		self.done = False

	def _fill(self):
		while not self.pending and not self.exhausted:
			line = self.getLine()
			if line is None:
				self.exhausted = True
			else:
				self.pending.extend(line.split())

	def nextWord(self):
		self._fill()
		if self.pending:
			word = self.pending.popleft()
			self.history.append(word)
			return word
		elif self.done:
			return None
		return ""

	def getContextSnippet(self):
		"""returns the last few words read, oldest first.
		"""
		return " ".join(w for w in self.history if w)
