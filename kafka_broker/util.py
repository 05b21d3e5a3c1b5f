# Licensed to the Apache Software Foundation (ASF) under one or more
# contributor license agreements.  See the NOTICE file distributed with
# this work for additional information regarding copyright ownership.
# The ASF licenses this file to You under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with
# the License.  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


def as_list(value):
  if value is None:
    return []
  if isinstance(value, str):
    return [x.strip() for x in value.split(',') if x.strip()]
  return list(value)


def zookeeper_connect(hosts, chroot=None):
  # host1:2181,host2:2181/chroot
  connect = ",".join(hosts)
  if chroot:
    connect += "/" + chroot.strip("/")
  return connect


def property_value(value):
  if value is True:
    return "true"
  if value is False:
    return "false"
  if isinstance(value, (list, tuple)):
    return ",".join(property_value(x) for x in value)
  return str(value)


def property_items(properties):
  """
  (key, value) pairs of a properties dict in key order, values in the form
  Kafka reads them.
  """
  if not properties:
    return []
  return [(key, property_value(properties[key])) for key in sorted(properties)]
