import logging
import sys

__version__ = '0.1.0.dev0'
__author__ = 'timecalc contributors'
__url__ = 'https://github.com/timecalc/timecalc'
__licence__ = 'GPL'
DEBUG = '--debug' in sys.argv
root_logger = logging.getLogger()
root_logger.addHandler(logging.StreamHandler())
if DEBUG:
    root_logger.setLevel(logging.DEBUG)
else:
    root_logger.setLevel(logging.INFO)
