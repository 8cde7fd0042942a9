import json
from types import SimpleNamespace

from admissions_scrape.client import ProgramsClient, resolve_source_url, DEFAULT_SOURCE_URL


def test_resolve_source_url_from_config(tmp_path):
    cfg = tmp_path / 'config.json'
    cfg.write_text(json.dumps({'url': ' https://example.test/search '}), encoding='utf-8')
    assert resolve_source_url(cfg) == 'https://example.test/search'


def test_resolve_source_url_defaults(tmp_path):
    assert resolve_source_url(tmp_path / 'missing.json') == DEFAULT_SOURCE_URL
    broken = tmp_path / 'broken.json'
    broken.write_text('{not json', encoding='utf-8')
    assert resolve_source_url(broken) == DEFAULT_SOURCE_URL


def test_get_listing_page_uses_session(monkeypatch):
    seen = {}

    def fake_get(url, timeout):
        seen['url'] = url
        seen['timeout'] = timeout
        return SimpleNamespace(url=url, status_code=200, encoding=None, text='<html></html>', raise_for_status=lambda: None)

    with ProgramsClient() as client:
        monkeypatch.setattr(client.session, 'get', fake_get)
        html = client.get_listing_page('https://example.test/search')
        assert client.session.headers['Referer'] == 'https://www.google.com'
    assert html == '<html></html>'
    assert seen == {'url': 'https://example.test/search', 'timeout': 30.0}
