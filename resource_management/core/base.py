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

__all__ = ["Resource", "ResourceArgument", "ForcedListArgument",
           "BooleanArgument"]

from resource_management.core.exceptions import Fail, InvalidArgument
from resource_management.core.environment import Environment


class ResourceArgument(object):
  def __init__(self, default=None, required=False):
    self.required = False # Prevents the initial validate from failing
    self.default = default
    self.required = required

  def validate(self, value):
    if self.required and value is None:
      raise InvalidArgument("Required argument %s missing" % self.name)
    return value


class ForcedListArgument(ResourceArgument):
  def validate(self, value):
    value = super(ForcedListArgument, self).validate(value)
    if not isinstance(value, (tuple, list)):
      value = [value]
    return value


class BooleanArgument(ResourceArgument):
  def validate(self, value):
    value = super(BooleanArgument, self).validate(value)
    if not value in (True, False):
      raise InvalidArgument(
        "Expected a boolean for %s received %r" % (self.name, value))
    return value


class Accessor(object):
  def __init__(self, name):
    self.name = name

  def __get__(self, obj, cls):
    if obj is None:
      return self
    try:
      return obj.arguments[self.name]
    except KeyError:
      arg = obj._arguments[self.name]
      val = arg.default
      if hasattr(val, '__call__'):
        val = val(obj)
      return arg.validate(val)

  def __set__(self, obj, value):
    obj.arguments[self.name] = obj._arguments[self.name].validate(value)


class ResourceMetaclass(type):
  def __init__(mcs, _name, bases, attrs):
    super(ResourceMetaclass, mcs).__init__(_name, bases, attrs)
    mcs._arguments = getattr(bases[0], '_arguments', {}).copy() if bases else {}
    for key, value in list(attrs.items()):
      if isinstance(value, ResourceArgument):
        value.name = key
        mcs._arguments[key] = value
        setattr(mcs, key, Accessor(key))


class Resource(object, metaclass=ResourceMetaclass):
  """
  Base of every declared resource.

  Instantiating a resource registers it with the active Environment; nothing
  is applied until Environment.run(). A list passed as the name declares one
  resource per element with the same arguments. A resource that fails
  validation is not registered.
  """
  action = ForcedListArgument(default="nothing")
  requires = ForcedListArgument(default=lambda obj: [])
  ignore_failures = BooleanArgument(default=False)
  not_if = ResourceArgument() # pass command e.g. not_if = ('ls','/root/jdk')
  only_if = ResourceArgument() # pass command

  actions = ["nothing"]

  def __init__(self, name, env=None, provider=None, **kwargs):
    if isinstance(name, (list, tuple)):
      if not name:
        raise Fail("%s declared with an empty list of names" % self.__class__.__name__)
      names = list(name)
    else:
      names = [name]

    self.env = env or Environment.get_instance()
    self.name = names[0]
    self.provider = provider or getattr(self, 'provider', None)

    r_type = self.__class__.__name__
    if self.name in self.env.resources.get(r_type, {}):
      raise Fail("Duplicate declaration: %s is already declared" % self)

    self.arguments = {}
    for key, value in kwargs.items():
      try:
        arg = self._arguments[key]
      except KeyError:
        raise Fail("%s received unsupported argument %s" % (self, key))
      else:
        try:
          self.arguments[key] = arg.validate(value)
        except InvalidArgument as exc:
          raise InvalidArgument("%s %s" % (self, exc))

    for action in self.action:
      if action not in self.actions:
        raise Fail("%s received unsupported action %s" % (self, action))

    for requirement in self.requires:
      if not isinstance(requirement, Resource):
        raise Fail("%s can only require declared resources, got %r" % (self, requirement))

    self.validate()

    self.env.resources.setdefault(r_type, {})[self.name] = self
    self.env.resource_list.append(self)

    for extra_name in names[1:]:
      self.__class__(extra_name, self.env, provider, **kwargs)

  def validate(self):
    pass

  def __repr__(self):
    return "%s['%s']" % (self.__class__.__name__, self.name)

  def __str__(self):
    return self.__repr__()
