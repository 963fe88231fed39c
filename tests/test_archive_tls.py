from __future__ import annotations

import octopt_core.archive as archive


def test_build_ssl_context_prefers_env_bundle(monkeypatch) -> None:
    calls: dict[str, str | None] = {}

    def fake_create_default_context(*, cafile=None):
        calls["cafile"] = cafile
        return object()

    monkeypatch.setattr(archive.ssl, "create_default_context", fake_create_default_context)
    monkeypatch.setenv("OCTOPT_CA_BUNDLE", "/tmp/custom-ca.pem")

    ctx = archive._build_ssl_context()
    assert ctx is not None
    assert calls["cafile"] == "/tmp/custom-ca.pem"


def test_build_ssl_context_uses_certifi_bundle(monkeypatch) -> None:
    calls: dict[str, str | None] = {}

    def fake_create_default_context(*, cafile=None):
        calls["cafile"] = cafile
        return object()

    class FakeCertifi:
        @staticmethod
        def where() -> str:
            return "/tmp/certifi.pem"

    monkeypatch.setattr(archive.ssl, "create_default_context", fake_create_default_context)
    monkeypatch.setattr(archive, "certifi", FakeCertifi)
    monkeypatch.delenv("OCTOPT_CA_BUNDLE", raising=False)

    ctx = archive._build_ssl_context()
    assert ctx is not None
    assert calls["cafile"] == "/tmp/certifi.pem"


def test_fetch_archive_uses_built_context(monkeypatch) -> None:
    sentinel = object()
    seen: dict[str, object] = {}

    class FakeResponse:
        def read(self) -> bytes:
            return b'{"pong": {"options": {"tickrate": 12}}}'

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    def fake_urlopen(request, timeout=None, context=None):
        seen["url"] = request.full_url
        seen["timeout"] = timeout
        seen["context"] = context
        return FakeResponse()

    monkeypatch.setattr(archive, "_build_ssl_context", lambda: sentinel)
    monkeypatch.setattr(archive.urllib.request, "urlopen", fake_urlopen)

    programs = archive.fetch_archive("https://example/programs.json", timeout_s=5)
    assert programs["pong"].tickrate == 12
    assert seen == {"url": "https://example/programs.json", "timeout": 5, "context": sentinel}
