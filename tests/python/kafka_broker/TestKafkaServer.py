'''
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
'''

import os
import shutil
import tempfile
from unittest import TestCase

from jinja2 import TemplateNotFound, UndefinedError
from resource_management.core import Environment, Logger
from kafka_broker.kafka import PACKAGE_DIR
from kafka_broker.kafka_server import kafka_server
from kafka_broker.params import resolve_broker_config

BROKERS = {
  'hostA': {'id': 1, 'port': 12345},
  'hostB': {'id': 2},
}


class TestKafkaServer(TestCase):

  def _declare(self, hostname='hostB', **settings):
    config = resolve_broker_config(hostname, BROKERS, **settings)
    with Environment(PACKAGE_DIR) as env:
      service = kafka_server(config, env)
    return env, service

  def _content(self, env, path):
    return env.resources['File'][path].content.get_content()

  def test_resource_graph(self):
    env, service = self._declare()

    default_file = env.resources['File']['/etc/default/kafka']
    server_properties = env.resources['File']['/etc/kafka/server.properties']
    log4j_properties = env.resources['File']['/etc/kafka/log4j.properties']
    log_dir = env.resources['Directory']['/var/spool/kafka']

    self.assertEqual(5, len(env.resource_list))
    self.assertIs(service, env.resources['Service']['kafka'])
    self.assertEqual([default_file, server_properties, log4j_properties, log_dir],
                     service.requires)
    for leaf in (default_file, server_properties, log4j_properties, log_dir):
      self.assertEqual([], leaf.requires)
    self.assertEqual(service, env.ordered_resources()[-1])

  def test_log_directories(self):
    env, service = self._declare(log_dirs=['/data/a/kafka', '/data/b/kafka'])

    for path in ('/data/a/kafka', '/data/b/kafka'):
      log_dir = env.resources['Directory'][path]
      self.assertEqual('kafka', log_dir.owner)
      self.assertEqual('kafka', log_dir.group)
      self.assertEqual(0o755, log_dir.mode)
      self.assertEqual(['create'], log_dir.action)
      self.assertTrue(log_dir in service.requires)
    self.assertEqual(5, len(service.requires))

  def test_config_dir(self):
    env, service = self._declare(kafka_config_dir='/opt/kafka/config', default_file='/etc/sysconfig/kafka')

    self.assertTrue('/opt/kafka/config/server.properties' in env.resources['File'])
    self.assertTrue('/opt/kafka/config/log4j.properties' in env.resources['File'])
    self.assertTrue('/etc/sysconfig/kafka' in env.resources['File'])

  def test_service_running(self):
    env, service = self._declare()

    self.assertEqual('kafka', service.service_name)
    self.assertEqual(['start'], service.action)

  def test_service_stopped(self):
    env, service = self._declare(enabled=False)

    self.assertEqual(['stop'], service.action)

  def test_service_not_restarted_on_change(self):
    env, service = self._declare()

    self.assertEqual(set(['action', 'requires']), set(service.arguments))

  def test_server_properties(self):
    env, service = self._declare(
      zookeeper_hosts=['zk1:2181', 'zk2:2181'],
      zookeeper_chroot='kafka',
      log_dirs=['/data/a/kafka', '/data/b/kafka'],
      metrics_properties={'kafka.metrics.reporters': 'kafka.metrics.KafkaCSVMetricsReporter'},
      server_properties={'message.max.bytes': 2000000},
    )
    content = self._content(env, '/etc/kafka/server.properties')
    lines = content.splitlines()

    self.assertTrue('broker.id=2' in lines)
    self.assertTrue('port=9092' in lines)
    self.assertTrue('log.dirs=/data/a/kafka,/data/b/kafka' in lines)
    self.assertTrue('zookeeper.connect=zk1:2181,zk2:2181/kafka' in lines)
    self.assertTrue('zookeeper.connection.timeout.ms=1000000' in lines)
    self.assertTrue('num.network.threads=2' in lines)
    self.assertTrue('socket.request.max.bytes=104857600' in lines)
    self.assertTrue('log.retention.hours=168' in lines)
    self.assertTrue('log.cleanup.policy=delete' in lines)
    self.assertTrue('auto.create.topics.enable=true' in lines)
    self.assertTrue('kafka.metrics.reporters=kafka.metrics.KafkaCSVMetricsReporter' in lines)
    self.assertTrue('message.max.bytes=2000000' in lines)
    self.assertFalse(any(line.startswith('host.name=') for line in lines))
    self.assertFalse(any(line.startswith('log.retention.bytes=') for line in lines))

  def test_server_properties_port_override(self):
    env, service = self._declare('hostA', host_name='kafka1.example.com', log_retention_bytes=1073741824)
    lines = self._content(env, '/etc/kafka/server.properties').splitlines()

    self.assertTrue('broker.id=1' in lines)
    self.assertTrue('port=12345' in lines)
    self.assertTrue('host.name=kafka1.example.com' in lines)
    self.assertTrue('log.retention.bytes=1073741824' in lines)

  def test_default_file(self):
    env, service = self._declare()
    lines = self._content(env, '/etc/default/kafka').splitlines()

    self.assertTrue('KAFKA_CONFIG=/etc/kafka' in lines)
    self.assertTrue('JMX_PORT=9999' in lines)
    self.assertTrue('ulimit -n 8192' in lines)
    self.assertTrue('KAFKA_LOG4J_OPTS="-Dlog4j.configuration=file:/etc/kafka/log4j.properties"' in lines)
    self.assertFalse(any(line.startswith('JAVA_HOME=') for line in lines))

  def test_default_file_java_settings(self):
    env, service = self._declare(java_home='/usr/lib/jvm/java-8-openjdk', heap_opts='-Xmx1G -Xms1G')
    lines = self._content(env, '/etc/default/kafka').splitlines()

    self.assertTrue('JAVA_HOME=/usr/lib/jvm/java-8-openjdk' in lines)
    self.assertTrue('KAFKA_HEAP_OPTS="-Xmx1G -Xms1G"' in lines)

  def test_log4j_properties(self):
    env, service = self._declare(kafka_log_file='/srv/log/kafka/server.log')
    lines = self._content(env, '/etc/kafka/log4j.properties').splitlines()

    self.assertTrue('log4j.appender.kafkaAppender.File=/srv/log/kafka/server.log' in lines)

  def test_idempotent(self):
    first_env, first_service = self._declare('hostA', num_partitions=4)
    second_env, second_service = self._declare('hostA', num_partitions=4)

    self.assertEqual([Logger._get_resource_repr(r) for r in first_env.resource_list],
                     [Logger._get_resource_repr(r) for r in second_env.resource_list])
    for path in first_env.resources['File']:
      self.assertEqual(self._content(first_env, path), self._content(second_env, path))

  def test_missing_template(self):
    config = resolve_broker_config('hostB', BROKERS, server_properties_template='missing.properties.j2')
    with Environment(PACKAGE_DIR) as env:
      self.assertRaises(TemplateNotFound, kafka_server, config, env)


class TestKafkaServerCustomTemplate(TestCase):

  def setUp(self):
    self.tmpdir = tempfile.mkdtemp()
    self.template = os.path.join(self.tmpdir, "server.properties.j2")
    with open(self.template, "w") as fp:
      fp.write("broker.id={{broker_id}}\nrack={{broker_rack}}\n")

  def tearDown(self):
    shutil.rmtree(self.tmpdir)

  def test_missing_template_variable(self):
    config = resolve_broker_config('hostB', BROKERS, server_properties_template=self.template)
    with Environment(PACKAGE_DIR) as env:
      kafka_server(config, env)
      server_properties = env.resources['File']['/etc/kafka/server.properties']

      self.assertRaises(UndefinedError, server_properties.content.get_content)
