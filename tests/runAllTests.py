"""
Runs all unit tests defined for the STC-S codec.

This script *asssumes* it is run from tests subdirectory of the code
tree and silently won't work (properly) otherwise.

Location of unit tests: pyunit-based test suites are files matching
*test.py; in addition, the doctests of all modules calling
doctest.testmod are run.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


import os
import sys

if len(sys.argv)!=1:
	raise sys.exit('%s takes no arguments'%sys.argv[0])

os.environ["STCSCODEC_LOG"] = "no"

import unittest
import doctest
import glob

import testresources


def hasDoctest(fName):
	with open(fName) as f:
		tx = f.read()
	return "doctest.testmod" in tx


def getDoctests():
	doctests = []
	for dir, dirs, names in os.walk("../stcscodec"):
		parts = dir.split("/")[1:]
		for name in [n for n in names if n.endswith(".py")]:
			if hasDoctest(os.path.join(dir, name)):
				name = ".".join(parts+[name[:-3]])
				doctests.append(doctest.DocTestSuite(name))
	return unittest.TestSuite(doctests)


def runAllTests(includeDoctests=True):
	pyunitSuite = testresources.TestLoader().loadTestsFromNames(
		[n[:-3] for n in glob.glob("*test.py")])
	runner = unittest.TextTestRunner(
		verbosity=int(os.environ.get("TEST_VERBOSITY", 1)))
	if includeDoctests:
		pyunitSuite = unittest.TestSuite([pyunitSuite, getDoctests()])
	return runner.run(pyunitSuite).wasSuccessful()


if __name__=="__main__":
	if not runAllTests():
		sys.exit(1)
