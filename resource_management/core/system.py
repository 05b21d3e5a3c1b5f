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

__all__ = ["System"]

import os
import platform
import socket

# /etc/os-release ID (or ID_LIKE) -> family used for provider lookup
OS_FAMILIES = {
  'redhat': ['rhel', 'centos', 'fedora', 'rocky', 'almalinux', 'amzn', 'ol'],
  'debian': ['debian', 'ubuntu'],
  'suse': ['suse', 'sles', 'opensuse', 'opensuse-leap'],
}

OS_RELEASE_FILE = "/etc/os-release"


class System(object):
  _instance = None

  @property
  def os_family(self):
    """
    Return the OS family name (redhat, debian, suse, ...), or the lower-cased
    platform name when the distribution is not recognized.
    """
    for os_id in self._os_release_ids():
      for family, ids in OS_FAMILIES.items():
        if os_id in ids:
          return family
    return platform.system().lower()

  @property
  def fqdn(self):
    return socket.getfqdn()

  def _os_release_ids(self):
    if not os.path.isfile(OS_RELEASE_FILE):
      return []
    ids = []
    with open(OS_RELEASE_FILE, "r") as fp:
      for line in fp:
        key, sep, value = line.strip().partition("=")
        if sep and key in ("ID", "ID_LIKE"):
          ids.extend(value.strip('"').lower().split())
    return ids

  @classmethod
  def get_instance(cls):
    if cls._instance is None:
      cls._instance = cls()
    return cls._instance
