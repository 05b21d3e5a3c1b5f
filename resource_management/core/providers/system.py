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

import grp
import os
import pwd
import shutil
from resource_management.core.exceptions import Fail
from resource_management.core.logger import Logger
from resource_management.core.providers import Provider


def _coerce_uid(user):
  try:
    return pwd.getpwnam(user).pw_uid
  except KeyError:
    raise Fail("User %s doesn't exist" % user)


def _coerce_gid(group):
  try:
    return grp.getgrnam(group).gr_gid
  except KeyError:
    raise Fail("Group %s doesn't exist" % group)


def _ensure_metadata(path, user, group, mode=None):
  stat = os.stat(path)

  if mode:
    existing_mode = stat.st_mode & 0o7777
    if existing_mode != mode:
      Logger.info("Changing permission for %s from %o to %o" % (path, existing_mode, mode))
      os.chmod(path, mode)

  if user:
    uid = _coerce_uid(user)
    if stat.st_uid != uid:
      Logger.info("Changing owner for %s from %d to %s" % (path, stat.st_uid, user))
      os.chown(path, uid, -1)

  if group:
    gid = _coerce_gid(group)
    if stat.st_gid != gid:
      Logger.info("Changing group for %s from %d to %s" % (path, stat.st_gid, group))
      os.chown(path, -1, gid)


class FileProvider(Provider):
  def action_create(self):
    path = self.resource.path

    if os.path.isdir(path):
      raise Fail("Applying %s failed, directory with name %s exists" % (self.resource, path))

    dirname = os.path.dirname(path)
    if not os.path.isdir(dirname):
      raise Fail("Applying %s failed, parent directory %s doesn't exist" % (self.resource, dirname))

    write = False
    content = self._get_content()
    if not os.path.exists(path):
      write = True
      reason = "it doesn't exist"
    elif self.resource.replace:
      if content is not None:
        with open(path, "rb") as fp:
          old_content = fp.read()
        if content != old_content:
          write = True
          reason = "contents don't match"
          if self.resource.backup:
            self._backup(path)

    if write:
      Logger.info("Writing %s because %s" % (self.resource, reason))
      with open(path, "wb") as fp:
        if content:
          fp.write(content)

    _ensure_metadata(self.resource.path, self.resource.owner,
                     self.resource.group, mode=self.resource.mode)

  def action_delete(self):
    path = self.resource.path

    if os.path.isdir(path):
      raise Fail("Applying %s failed, %s is directory not file!" % (self.resource, path))

    if os.path.exists(path):
      Logger.info("Deleting %s" % self.resource)
      os.unlink(path)

  def _backup(self, path):
    backup_path = "%s.%s" % (path, self.resource.backup)
    Logger.info("Backing up %s to %s" % (path, backup_path))
    shutil.copy2(path, backup_path)

  def _get_content(self):
    content = self.resource.content
    if content is None:
      return None
    elif hasattr(content, "__call__"):
      content = content()

    if isinstance(content, str):
      return content.encode(self.resource.encoding)
    elif isinstance(content, bytes):
      return content
    raise Fail("Unknown source type for %s: %r" % (self, content))


class DirectoryProvider(Provider):
  def action_create(self):
    path = self.resource.path
    if not os.path.exists(path):
      Logger.info("Creating directory %s" % self.resource)
      if self.resource.recursive:
        os.makedirs(path)
      else:
        dirname = os.path.dirname(path)
        if not os.path.isdir(dirname):
          raise Fail("Applying %s failed, parent directory %s doesn't exist" % (self.resource, dirname))

        os.mkdir(path)

    if not os.path.isdir(path):
      raise Fail("Applying %s failed, file %s already exists" % (self.resource, path))

    _ensure_metadata(path, self.resource.owner, self.resource.group,
                     mode=self.resource.mode)

  def action_delete(self):
    path = self.resource.path
    if os.path.exists(path):
      if not os.path.isdir(path):
        raise Fail("Applying %s failed, %s is not a directory" % (self.resource, path))

      Logger.info("Removing directory %s and all its content" % self.resource)
      shutil.rmtree(path)
