"""Configuration, logging and argument checking helpers of dmpgating.
"""
from .logging import LogLevel, set_log
from .options_dictionary import OptionsDictionary
