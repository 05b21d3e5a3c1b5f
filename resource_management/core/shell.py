#!/usr/bin/env python
"""
Licensed to the Apache Software Foundation (ASF) under one
or more contributor license agreements.  See the NOTICE file
distributed with this work for additional information
regarding copyright ownership.  The ASF licenses this file
to you under the Apache License, Version 2.0 (the
"License"); you may not use this file except in compliance
with the License.  You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

Kafka Broker Package

"""

__all__ = ["call", "quote_bash_args"]

import string
import subprocess
from resource_management.core.logger import Logger


def call(command, logoutput=False, cwd=None, env=None):
  """
  Execute shell command

  @param command: list/tuple of arguments (recommended as more safe - don't need to escape)
  or string of the command to execute
  @param logoutput: boolean, whether command output should be logged of not

  @return: return_code, stdout
  """
  # convert to string and escape
  if isinstance(command, (list, tuple)):
    command = ' '.join(quote_bash_args(x) for x in command)

  command = ["/bin/bash", "--login", "-c", command]
  proc = subprocess.Popen(command, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                          cwd=cwd, env=env, shell=False, universal_newlines=True)

  out = proc.communicate()[0].strip('\n')
  code = proc.returncode

  if logoutput and out:
    Logger.info(out)

  return code, out


def quote_bash_args(command):
  if not command:
    return "''"
  valid = set(string.ascii_letters + string.digits + '@%_-+=:,./')
  for char in command:
    if char not in valid:
      return "'" + command.replace("'", "'\"'\"'") + "'"
  return command
