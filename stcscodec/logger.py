"""
The logger of the STC-S codec.

The module defines a member logger which is a logging.Logger writing
to stderr and, if configured, a log file.  It also subscribes to the
events of events.ui so warnings and errors end up in the log.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import logging

from stcscodec import config
from stcscodec import events

_logLevelDict = {
	"debug": logging.DEBUG,
	"info": logging.INFO,
	"warning": logging.WARNING,
	"error": logging.ERROR,
	"critical": logging.CRITICAL,
}

logger = logging.getLogger("stcscodec")

_formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
_handler = logging.StreamHandler()
_handler.setFormatter(_formatter)
logger.addHandler(_handler)

_logFile = config.getConfig("logFile")
if _logFile:
	try:
		_fileHandler = logging.FileHandler(_logFile, "a")
		_fileHandler.setFormatter(_formatter)
		logger.addHandler(_fileHandler)
	except IOError:
		logger.warning("Could not open log file %s, logging to stderr only."%
			_logFile)

logger.setLevel(_logLevelDict[config.getConfig("logLevel")])


def setLogLevel(levelName):
	"""sets the level of the codec's logger from one of the names debug,
	info, warning, error, critical.
	"""
	logger.setLevel(_logLevelDict[levelName])


critical = logger.critical
error = logger.error
warning = logger.warning
info = logger.info
debug = logger.debug


def _logWarning(stcsWarning):
	warning("STC-S (level %d): %s"%(stcsWarning.level, stcsWarning.message))

events.ui.subscribeWarning(_logWarning)
events.ui.subscribeError(error)
events.ui.subscribeInfo(info)
