# This file is part of logcollector, an in-memory line collector for log output.
# Copyright 2018 Patrick Plagwitz
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from paver.easy import *
import sys

import pytest
import os
from py.path import local

Root = (local(os.path.abspath(".")) / __file__).dirpath()
PreviousCwd = local(os.getcwd())

def runPyTest(testFiles):
  return pytest.main(["--color=yes", "-v"] + testFiles)

def prependToPythonPath(newPath):
  envVarName = "PYTHONPATH"

  if envVarName in os.environ:
    os.environ[envVarName] = newPath + ":" + os.environ[envVarName]
  else:
    os.environ[envVarName] = newPath

  sys.path = [newPath] + sys.path

@task
def setup_testing():
  prependToPythonPath(str(Root / "logcollector/src"))
  prependToPythonPath(str(Root / "logcollector/test"))

@task
@needs(["setup_testing"])
def unit_test():
  if runPyTest([str(Root / "logcollector/test/test/logcollector")]) != 0:
    raise BuildFailure("unit tests failed")

@task
@needs(["setup_testing"])
@consume_args
def test_only(args):
  testFiles = [str(PreviousCwd / arg) for arg in args]
  if args and args[0] == "--pdb":
    import pdb
    pdb.runcall(runPyTest, testFiles[1:])
  elif runPyTest(testFiles) != 0:
    raise BuildFailure("tests failed")

@task
@needs(["unit_test"])
def test():
  pass
