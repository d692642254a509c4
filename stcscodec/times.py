"""
Helpers for time parsing and conversion.

Internally, all times are modified julian dates in the time scale of
their frame.  STC-S allows JD, MJD and ISO literals.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import datetime
import math
import re

from stcscodec.common import *


_isoDTRE = re.compile(r"(?P<year>\d\d\d\d)-?(?P<month>\d\d)-?(?P<day>\d\d)"
		r"(?:T(?P<hour>\d\d):?(?P<minute>\d\d):?"
		r"(?P<seconds>\d\d)(?P<secFracs>\.\d*)?Z?)?$")

def parseISODT(literal):
	"""returns a datetime object for a ISO time literal.

	There's no timezone support.

	>>> parseISODT("1998-12-14")
	datetime.datetime(1998, 12, 14, 0, 0)
	>>> parseISODT("1998-12-14T13:30:12")
	datetime.datetime(1998, 12, 14, 13, 30, 12)
	>>> parseISODT("1998-12-14T13:30:12Z")
	datetime.datetime(1998, 12, 14, 13, 30, 12)
	>>> parseISODT("1998-12-14T13:30:12.224Z")
	datetime.datetime(1998, 12, 14, 13, 30, 12, 224000)
	>>> parseISODT("19981214T133012Z")
	datetime.datetime(1998, 12, 14, 13, 30, 12)
	>>> parseISODT("junk")
	Traceback (most recent call last):
	stcscodec.common.STCLiteralError: Bad ISO datetime literal: junk
	"""
	mat = _isoDTRE.match(literal.strip())
	if not mat:
		raise STCLiteralError("Bad ISO datetime literal: %s"%literal,
			literal)
	parts = mat.groupdict()
	if parts["hour"] is None:
		parts["hour"] = parts["minute"] = parts["seconds"] = 0
	if parts["secFracs"] is None:
		parts["secFracs"] = 0
	else:
		parts["secFracs"] = "0"+parts["secFracs"]
	try:
		return datetime.datetime(int(parts["year"]), int(parts["month"]),
			int(parts["day"]), int(parts["hour"]), int(parts["minute"]),
			int(parts["seconds"]), int(round(float(parts["secFracs"])*1000000)))
	except ValueError:
		raise STCLiteralError("Bad ISO datetime literal: %s"%literal,
			literal)


def dateTimeToJdn(dt):
	"""returns a julian day number (including fractionals) from a datetime
	instance.
	"""
	a = (14-dt.month)//12
	y = dt.year+4800-a
	m = dt.month+12*a-3
	jdn = dt.day+(153*m+2)//5+365*y+y//4-y//100+y//400-32045
	try:
		secsOnDay = dt.hour*3600+dt.minute*60+dt.second+dt.microsecond/1e6
	except AttributeError:
		secsOnDay = 0
	return jdn+(secsOnDay-43200)/86400.


def dateTimeToMJD(dt):
	"""returns a modified julian date for a datetime instance.
	"""
	return dateTimeToJdn(dt)-mjdOffset


_mjdEpoch = datetime.datetime(1858, 11, 17)

def mjdToDateTime(mjd):
	"""returns a datetime.datetime instance for a modified julian date.

	>>> mjdToDateTime(51544.5)
	datetime.datetime(2000, 1, 1, 12, 0)
	"""
	return _mjdEpoch+datetime.timedelta(days=mjd)


def jdToMJD(jd):
	return jd-mjdOffset


def mjdToJD(mjd):
	return mjd+mjdOffset


def formatISO(mjd, ndp=1):
	"""returns an ISO literal for mjd with ndp digits after the decimal
	point of the seconds.

	>>> formatISO(51544.5)
	'2000-01-01T12:00:00.0'
	>>> formatISO(51544.75, 3)
	'2000-01-01T18:00:00.000'
	>>> formatISO(51544.0, 0)
	'2000-01-01T00:00:00'
	"""
	days = math.floor(mjd)
	secs = round((mjd-days)*86400, ndp)
	if secs>=86400:
		days, secs = days+1, secs-86400
	date = _mjdEpoch+datetime.timedelta(days=days)
	hours = int(secs//3600)
	minutes = int((secs-hours*3600)//60)
	seconds = round(secs-hours*3600-minutes*60, ndp)
	if ndp>0:
		secStr = "%0*.*f"%(ndp+3, ndp, seconds)
	else:
		secStr = "%02d"%int(seconds)
	return "%04d-%02d-%02dT%02d:%02d:%s"%(date.year, date.month, date.day,
		hours, minutes, secStr)


def _test():
	import doctest
	from stcscodec import times
	doctest.testmod(times)

if __name__=="__main__":
	_test()
