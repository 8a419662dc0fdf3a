import pytest

from shootgen.model import CreateShootConfig


@pytest.fixture
def shoot_cfg():
    return CreateShootConfig(
        shoot_name="tm-shoot",
        namespace="garden-it",
        k8s_version="1.27.3",
        shoot_annotations={"team": "qa", "purpose": "testrun"},
    )
