import pytest

from infrastructure.clients.aws.session_provider import SessionProvider


@pytest.mark.unit
class TestSessionProvider:
    def test_empty_configuration(self):
        kw = SessionProvider().build_client_kwargs(service_name="s3")

        assert kw == {"session_config": None, "client_config": None, "role_arn": None}

    def test_explicit_role_wins_over_map(self):
        provider = SessionProvider(service_role_map={"s3": "arn:map"})

        kw = provider.build_client_kwargs(service_name="s3", role_arn="arn:explicit")

        assert kw["role_arn"] == "arn:explicit"

    def test_role_lookup(self):
        provider = SessionProvider(service_role_map={"s3": "arn:map", "sts": ""})

        assert provider.get_role_arn_for_service("s3") == "arn:map"
        assert provider.get_role_arn_for_service("sts") is None
        assert provider.get_role_arn_for_service("dynamodb") is None
