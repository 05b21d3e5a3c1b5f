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

"""
Resolution of the broker configuration for one host.

Only the broker id and port are looked up per host, in the 'brokers'
registry. Every other setting applies to all brokers and falls back to
DEFAULTS when the command does not set it.
"""

from resource_management import *
from kafka_broker import util

CONFIG_SECTION = "kafka-broker"

DEFAULTS = {
  'enabled': True,
  'default_port': 9092,
  'log_dirs': ['/var/spool/kafka'],

  'kafka_config_dir': '/etc/kafka',
  'default_file': '/etc/default/kafka',
  'kafka_log_file': '/var/log/kafka/kafka.log',
  'kafka_user': 'kafka',
  'kafka_group': 'kafka',

  'default_template': 'kafka.default.j2',
  'server_properties_template': 'server.properties.j2',
  'log4j_properties_template': 'log4j.properties.j2',

  'zookeeper_hosts': ['localhost:2181'],
  'zookeeper_chroot': None,
  'zookeeper_connection_timeout_ms': 1000000,
  'zookeeper_session_timeout_ms': 6000,

  # /etc/default/kafka
  'java_home': None,
  'java_opts': None,
  'classpath': None,
  'heap_opts': None,
  'jvm_performance_opts': None,
  'nofiles_ulimit': 8192,
  'jmx_port': 9999,

  'host_name': None,
  'auto_create_topics_enable': True,
  'num_partitions': 1,
  'default_replication_factor': 1,
  'replica_lag_time_max_ms': 10000,
  'replica_lag_max_messages': 4000,
  'replica_socket_timeout_ms': 30000,
  'replica_socket_receive_buffer_bytes': 65536,
  'num_replica_fetchers': 1,
  'replica_fetch_max_bytes': 1048576,

  'num_network_threads': 2,
  'num_io_threads': 2,
  'socket_send_buffer_bytes': 1048576,
  'socket_receive_buffer_bytes': 1048576,
  'socket_request_max_bytes': 104857600,

  'log_flush_interval_messages': 10000,
  'log_flush_interval_ms': 1000,
  'log_retention_hours': 168, # 1 week
  'log_retention_bytes': None,
  'log_segment_bytes': 536870912,
  'log_cleanup_interval_mins': 1,
  'log_cleanup_policy': 'delete',

  # kafka.metrics.* entries of server.properties
  'metrics_properties': {},
  # any other server.properties entries, written as given
  'server_properties': {},
}


class MissingHostConfig(Fail):
  """
  The host has no usable entry in the brokers registry.
  """
  pass


class BrokerConfig(object):
  """
  Configuration of the broker on one host: the broker id and port from the
  registry plus every global setting.
  """

  def __init__(self, hostname, broker_id, broker_port, settings):
    self.hostname = hostname
    self.broker_id = broker_id
    self.broker_port = broker_port
    self.settings = settings

  def __getattr__(self, name):
    try:
      return self.__dict__['settings'][name]
    except KeyError:
      raise AttributeError("'%s' object has no attribute '%s'" % (self.__class__.__name__, name))

  @property
  def service_action(self):
    return "start" if self.enabled else "stop"

  def as_dict(self):
    """
    Template parameters: every setting plus the resolved and derived values.
    """
    params = dict(self.settings)
    params.update({
      'hostname': self.hostname,
      'broker_id': self.broker_id,
      'broker_port': self.broker_port,
      'zookeeper_connect': util.zookeeper_connect(self.zookeeper_hosts, self.zookeeper_chroot),
      'log_dirs_csv': ",".join(self.log_dirs),
      'metrics_property_items': util.property_items(self.metrics_properties),
      'server_property_items': util.property_items(self.server_properties),
    })
    return params

  def __eq__(self, other):
    return isinstance(other, BrokerConfig) and self.as_dict() == other.as_dict()

  __hash__ = None

  def __repr__(self):
    return "BrokerConfig(%s, id=%s, port=%s)" % (self.hostname, self.broker_id, self.broker_port)


def broker_port(record, default_port):
  """
  Port of a broker registry record.

  Three cases: no 'port' key, a port that is empty or not positive (0, "0",
  "", None, -1) and a positive port. Only the last one overrides
  default_port; the others are treated like a missing port.
  """
  if 'port' not in record:
    return default_port

  port = record['port']
  if port in (None, ""):
    Logger.debug("Ignoring empty broker port %r, using %s" % (port, default_port))
    return default_port

  try:
    port = int(port)
  except (TypeError, ValueError):
    raise Fail("Broker port %r is not a number" % (record['port'],))

  if port <= 0:
    Logger.debug("Ignoring broker port %d, using %s" % (port, default_port))
    return default_port

  return port


def resolve_broker_config(hostname, brokers, **settings):
  """
  Resolve the broker configuration of the given host.

  @param hostname: identity of the host, the key looked up in brokers
  @param brokers: registry of host name -> {'id': ..., 'port': ...}
  @param settings: global settings overriding DEFAULTS
  @raise MissingHostConfig: the host is not in brokers or has no id
  """
  if hostname not in brokers:
    raise MissingHostConfig("Host %s is not in the Kafka brokers registry (%s)"
                            % (hostname, ", ".join(sorted(brokers)) or "empty"))
  record = brokers[hostname]

  if 'id' not in record or record['id'] is None:
    raise MissingHostConfig("Broker id is not defined for host %s" % hostname)

  unknown = sorted(set(settings) - set(DEFAULTS))
  if unknown:
    raise Fail("Unknown Kafka broker settings: %s" % ", ".join(unknown))

  merged = dict(DEFAULTS)
  merged.update(settings)
  merged['log_dirs'] = util.as_list(merged['log_dirs'])
  merged['zookeeper_hosts'] = util.as_list(merged['zookeeper_hosts'])

  config = BrokerConfig(hostname, record['id'],
                        broker_port(record, merged['default_port']), merged)
  Logger.debug("Resolved %r" % config)
  return config


def broker_config_from_command(config):
  """
  Resolve the broker configuration from a command configuration, the host
  identity is the command 'hostname'.
  """
  hostname = default('/hostname', None, config)
  if not hostname:
    hostname = System.get_instance().fqdn

  section = default('/configurations/' + CONFIG_SECTION, {}, config)
  settings = dict((key, section[key]) for key in section if key != 'brokers')
  brokers = section['brokers'] if 'brokers' in section else {}

  return resolve_broker_config(hostname, brokers, **settings)
