# utils/__init__.py
# This file is part of Redprint - Erlang trace message printing
#
# Utility modules: logging and trace file reading.
#
# Submodules are imported explicitly (utils.logger, utils.trace_reader);
# the parser package depends on utils.logger, so trace_reader is not
# loaded eagerly here.
