import pytest

from chartcheck.manifest import load_documents

SERVICE_FOO_IN_BAR = """
apiVersion: v1
kind: Service
metadata:
  name: foo
  namespace: bar
"""

SERVICE_BAR_IN_FOO = """
apiVersion: v1
kind: Service
metadata:
  name: bar
  namespace: foo
"""


@pytest.fixture
def service_foo():
    return load_documents(SERVICE_FOO_IN_BAR)[0]


@pytest.fixture
def service_bar():
    return load_documents(SERVICE_BAR_IN_FOO)[0]


@pytest.fixture
def two_services(service_foo, service_bar):
    return [service_foo, service_bar]
