"""
Helper classes for the codec's unit tests.

WARNING: This messes up some global state (see messageCollector).  DO NOT
import into modules doing regular work.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


import contextlib
import os
import sys
import traceback
import unittest
from io import StringIO

import testresources
from testresources import TestResource  #noflake: exported name

from stcscodec import events

# Here's the deal on TestResource: When setting up complicated stuff for
# tests (like, a parsed STC-S description several tests look at), define
# a TestResource for it.  Override the make(dependents) method returning
# something and the clean(res) method to destroy whatever you created in
# make().
#
# Then, in VerboseTests, have a class attribute
# resources = [(name1, res1), (name2, res2)]
# giving attribute names and resource *instances*.
# There's an example in stcsasttest.py
#
# If you use this and you have a setUp of your own, you *must* call
# the superclass's setUp method.


class VerboseTest(testresources.ResourcedTestCase):
	"""A TestCase with a couple of convenient assert methods.
	"""
	def assertRaisesVerbose(self, exception, callable, args, msg):
		try:
			callable(*args)
		except exception:
			return
		else:
			raise self.failureException(msg)

	def assertRaisesWithMsg(self, exception, errMsg, callable, args, msg=None,
			**kwargs):
		try:
			callable(*args, **kwargs)
		except exception as ex:
			if errMsg!=str(ex):
				raise self.failureException(
					"Expected %r, got %r as exception message"%(errMsg, str(ex)))
		else:
			raise self.failureException(msg or "%s not raised"%exception)

	def assertAlmostEqualVector(self, first, second, places=7, msg=None):
		try:
			self.assertEqual(len(first), len(second))
			for f, s in zip(first, second):
				self.assertAlmostEqual(f, s, places)
		except AssertionError:
			if msg:
				raise AssertionError(msg)
			else:
				raise AssertionError("%s != %s within %d places"%(
					first, second, places))

	def assertEqualToWithin(self, a, b, ratio=1e-7, msg=None):
		"""asserts that abs(a-b/(a+b))<ratio.

		If a+b are an underflow, we error out right now.
		"""
		if msg is None:
			msg = "%s != %s to within %s of the sum"%(a, b, ratio)
		denom = abs(a+b)
		self.assertTrue(abs(a-b)/denom<ratio, msg)


class SamplesBasedAutoTest(type):
	"""A metaclass that builds tests out of a samples attribute of a class.

	To use this, give the class a samples attribute containing a sequence
	of anything, and a _runTest(sample) method receiving one item of
	that sequence.

	The metaclass will create one test<n> method for each sample.
	"""
	def __new__(cls, name, bases, dict):
		for sampInd, sample in enumerate(dict.get("samples", ())):
			def testFun(self, sample=sample):
				self._runTest(sample)
			dict["test%02d"%sampInd] = testFun
		return type.__new__(cls, name, bases, dict)


class SimpleSampleComparisonTest(VerboseTest, metaclass=SamplesBasedAutoTest):
	"""A base class for tests that simply run a function and compare
	for equality.

	The function to be called is in the functionToRun attribute (wrap
	it in a staticmethod).

	The samples are pairs of (input, output).  Output may be an
	exception (or just the serialised form of the exception).
	"""
	def _runTest(self, sample):
		val, expected = sample
		try:
			self.assertEqual(self.functionToRun(val),
				expected)
		except AssertionError:
			raise
		except Exception as ex:
			if str(ex)!=str(expected):
				raise


def captureOutput(callable, args=(), kwargs={}):
	"""runs callable(*args, **kwargs) and captures the output.

	The function returns a tuple of return value, stdout output, stderr output.
	"""
	realOut, realErr = sys.stdout, sys.stderr
	sys.stdout, sys.stderr = StringIO(), StringIO()
	try:
		retVal = 2 # in case the callable sys.exits
		try:
			retVal = callable(*args, **kwargs)
		except SystemExit as ex:
			# don't terminate just because someone thinks it's a good idea
			retVal = ex.code
	finally:
		outCont, errCont = sys.stdout.getvalue(), sys.stderr.getvalue()
		sys.stdout, sys.stderr = realOut, realErr
	return retVal, outCont, errCont


class CatchallUI(object):
	"""A replacement for events.ui, collecting the messages being sent.

	This is to write tests against producing UI events.  Use it with
	the messageCollector context manager below.
	"""
	def __init__(self):
		self.events = []

	def record(self, evType, args, kwargs):
		self.events.append((evType, args, kwargs))

	def __getattr__(self, attName):
		if attName.startswith("notify"):
			return lambda *args, **kwargs: self.record(attName[6:], args, kwargs)
		raise AttributeError(attName)


@contextlib.contextmanager
def messageCollector():
	"""A context manager recording UI events.

	The object returned by the context manager is a CatchallUI; get the
	events accumulated during the run time in its events attribute.
	"""
	tempui = CatchallUI()
	realui = events.ui
	try:
		events.ui = tempui
		yield tempui
	finally:
		events.ui = realui


def main(testClass, methodPrefix=None):
	from stcscodec import logger

	if os.environ.get("STCSCODEC_LOG")!="no":
		logger.setLogLevel("debug")

	try:
		# two args: first one is class name, locate it in caller's globals
		# and ignore anything before any dot for cut'n'paste convenience
		if len(sys.argv)>2:
			className = sys.argv[-2].split(".")[-1]
			testClass = getattr(sys.modules["__main__"], className)

		# one arg: test method prefix on testClass
		if len(sys.argv)>1:
			prefix = methodPrefix or sys.argv[-1]
			suite = testresources.OptimisingTestSuite(
				[testClass(name)
					for name in unittest.TestLoader().getTestCaseNames(testClass)
					if name.startswith(prefix)])
		else:  # Zero args, emulate unittest.run behaviour
			suite = testresources.TestLoader().loadTestsFromModule(
				sys.modules["__main__"])

		runner = unittest.TextTestRunner(
			verbosity=int(os.environ.get("TEST_VERBOSITY", 1)))
		runner.run(suite)
	except (SystemExit, KeyboardInterrupt):
		raise
	except Exception:
		traceback.print_exc()
