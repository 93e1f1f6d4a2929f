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

class UnsupportedChunkException(TypeError):
  def __init__(self, chunk):
    self.chunk = chunk

  def __str__(self):
    return "cannot write chunk of type ‘{0}’, expected bytes or str".format(
        type(self.chunk).__name__)
