from __future__ import annotations

import pytest

import relay_providers
from relay_providers.base.errors import ErrorCode, MissingCredentialError, ProviderError
from relay_providers.base.factory import ProviderFactory, UnknownProviderError
from relay_providers.base.models import ModelConfig
from relay_providers.config import MappingConfig
from relay_providers.mock import MockProvider
from relay_providers.sambanova import SambanovaProvider


def test_supported_lists_registered_providers():
    assert ProviderFactory.supported() == ("sambanova", "mock")  # nosec B101


def test_create_resolves_names_case_insensitively(sambanova_config):
    provider = ProviderFactory.create(" SambaNova ", config=sambanova_config)
    assert isinstance(provider, SambanovaProvider)  # nosec B101


def test_create_passes_model_and_kwargs(sambanova_config, ok_transport):
    model = ModelConfig.new("Meta-Llama-3.3-70B-Instruct")
    provider = ProviderFactory.create("sambanova", model, config=sambanova_config, transport=ok_transport)
    assert provider.get_model_config() is model  # nosec B101


def test_create_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nope", config=MappingConfig())


def test_create_rejects_unexpected_kwargs(sambanova_config):
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("sambanova", config=sambanova_config, bogus=True)


def test_create_rejects_unexpected_kwargs_for_mock():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("mock", config=MappingConfig(), transport=None)


def test_type_error_inside_from_env_is_not_a_lookup_error(monkeypatch):
    def broken_from_env(cls, model=None, *, config=None, reply=None, usage=None, fail_with=None):
        raise TypeError("adapter bug")

    monkeypatch.setattr(MockProvider, "from_env", classmethod(broken_from_env))
    with pytest.raises(TypeError, match="adapter bug") as ei:
        ProviderFactory.create("mock", config=MappingConfig())
    assert not isinstance(ei.value, UnknownProviderError)  # nosec B101


def test_construction_errors_propagate_unchanged():
    with pytest.raises(MissingCredentialError):
        ProviderFactory.create("sambanova", config=MappingConfig())


def test_metadata_without_instantiation():
    meta = ProviderFactory.metadata("sambanova")
    assert meta.default_model == "Meta-Llama-3.1-405B-Instruct"  # nosec B101
    assert [m.name for m in ProviderFactory.all_metadata()] == ["sambanova", "mock"]  # nosec B101


def test_top_level_create_wraps_unknown_provider():
    with pytest.raises(ProviderError) as ei:
        relay_providers.create("nope", config=MappingConfig())
    assert ei.value.code is ErrorCode.NOT_FOUND  # nosec B101
    assert ei.value.provider == "nope"  # nosec B101


def test_top_level_create_keeps_taxonomy_errors():
    with pytest.raises(MissingCredentialError):
        relay_providers.create("sambanova", config=MappingConfig())


def test_top_level_create_mock():
    provider = relay_providers.create("mock", config=MappingConfig())
    assert isinstance(provider, MockProvider)  # nosec B101
