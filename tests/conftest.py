"""Shared fixtures for identity_ocr tests"""
import json
from types import SimpleNamespace
from unittest.mock import Mock

import mlflow
import pytest


@pytest.fixture(autouse=True, scope="session")
def mlflow_tracking(tmp_path_factory):
    """Keep traces written during tests out of the working directory"""
    tracking_dir = tmp_path_factory.mktemp("mlruns")
    mlflow.set_tracking_uri(tracking_dir.as_uri())
    yield


def make_completion(*contents):
    """Build a completion object with one choice per content value"""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def fm_client():
    """Mock OpenAI client; set chat.completions.create.return_value per test"""
    client = Mock()
    client.chat.completions.create.return_value = make_completion(json.dumps({"name": ""}))
    return client


@pytest.fixture
def publisher():
    """Mock message publisher"""
    pub = Mock()
    pub.send = Mock(return_value=None)
    return pub


@pytest.fixture
def completion():
    """Factory for fake completion responses"""
    return make_completion
