"""
usage_tally: token usage statistics from local assistant session logs.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"
