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

import sys
import pytest
from logcollector.interceptingoutput import InterceptingOutput
from logcollector.linecollector import LineCollector

def test_shouldCollectEverythingPrintedToStdout():
  collector = LineCollector()
  originalStdout = sys.stdout

  with InterceptingOutput.stdout(collector):
    print("first")
    print("second", end="")

  assert sys.stdout is originalStdout
  assert collector.cloneLines() == ["first", "second"]

def test_shouldCollectEverythingWrittenToStderr():
  collector = LineCollector()
  originalStderr = sys.stderr

  with InterceptingOutput.stderr(collector) as sink:
    assert sink is collector
    sys.stderr.write("warning\n")

  assert sys.stderr is originalStderr
  assert collector.cloneLines() == ["warning"]

def test_shouldRestoreTheStreamIfAnExceptionOccurs():
  collector = LineCollector()
  originalStdout = sys.stdout

  with pytest.raises(ValueError):
    with InterceptingOutput.stdout(collector):
      print("before failure")
      raise ValueError()

  assert sys.stdout is originalStdout
  assert collector.cloneLines() == ["before failure"]

def test_shouldAcceptASharedCollector():
  shared = LineCollector.newShared()

  with InterceptingOutput.stdout(shared):
    print("shared")

  assert shared.cloneLines() == ["shared"]
