from setuptools import setup, find_packages

VERSION = "0.3"


install_requires = ["pyparsing>=3.0", "numpy"]

SETUP_ARGS = {
	"name": "stcscodec",
	"description": "Reading and writing STC-S, the string serialization"
		" of VO Space-Time-Coordinates",
	"url": "http://vo.ari.uni-heidelberg.de/soft",
	"license": "GPL",
	"author": "Markus Demleitner",
	"author_email": "gavo@ari.uni-heidelberg.de",
	"packages": find_packages(exclude=["tests"]),
	"zip_safe": True,
	"install_requires": install_requires,
	"extras_require": {
		"test": ["testresources"],
	},
	"entry_points": {
		'console_scripts': [
			'stcscodec = stcscodec.cli:main',
		]
	},
	"version": VERSION,
}

if __name__=="__main__":
	setup(**SETUP_ARGS)
