import pytest

from funcpipe.config.settings import FuncpipeSettings


class DescribeFuncpipeSettings:
    def it_has_quiet_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("FUNCPIPE_DEBUG", "FUNCPIPE_LOG_LEVEL", "FUNCPIPE_LOG_SERIALIZE"):
            monkeypatch.delenv(name, raising=False)

        settings = FuncpipeSettings(_env_file=None)

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_serialize is False

    def it_reads_prefixed_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FUNCPIPE_DEBUG", "true")
        monkeypatch.setenv("FUNCPIPE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FUNCPIPE_LOG_SERIALIZE", "1")

        settings = FuncpipeSettings(_env_file=None)

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.log_serialize is True

    def it_rejects_unknown_log_levels(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FUNCPIPE_LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError):
            FuncpipeSettings(_env_file=None)
