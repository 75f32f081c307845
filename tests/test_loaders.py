# tests/test_loaders.py
"""
Tests для webi18n/loaders.py

Покрывает:
- FileSystemLoader - успешное чтение, нет файла, битый JSON, не объект
- PackageResourceLoader - словари внутри пакета
- HttpLoader - через httpx.MockTransport, без сети
- loader_for_path()
"""

import httpx
import pytest

from webi18n.exceptions import LoaderError
from webi18n.loaders import (FileSystemLoader, HttpLoader, PackageResourceLoader,
                             loader_for_path)


class TestFileSystemLoader:

    def test_loads_dictionary(self, locales_dir):
        data = FileSystemLoader().load_dictionary(str(locales_dir), "fr")
        assert data["greeting"] == "Bonjour"

    def test_missing_file_raises_loader_error(self, locales_dir):
        with pytest.raises(LoaderError) as exc_info:
            FileSystemLoader().load_dictionary(str(locales_dir), "de")
        assert exc_info.value.lang == "de"
        assert "de.json" in exc_info.value.source

    def test_malformed_json_raises_loader_error(self, tmp_path):
        (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(LoaderError):
            FileSystemLoader().load_dictionary(str(tmp_path), "en")

    def test_non_object_json_raises_loader_error(self, tmp_path):
        (tmp_path / "en.json").write_text('["a", "b"]', encoding="utf-8")
        with pytest.raises(LoaderError):
            FileSystemLoader().load_dictionary(str(tmp_path), "en")


class TestPackageResourceLoader:

    @pytest.fixture
    def bundled_package(self, tmp_path, monkeypatch):
        package = tmp_path / "bundled_locales_pkg"
        (package / "locales").mkdir(parents=True)
        (package / "__init__.py").write_text("", encoding="utf-8")
        (package / "locales" / "en.json").write_text('{"title": "Shop"}', encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))
        return "bundled_locales_pkg"

    def test_loads_from_package_subdirectory(self, bundled_package):
        data = PackageResourceLoader().load_dictionary(f"{bundled_package}/locales", "en")
        assert data == {"title": "Shop"}

    def test_missing_resource_raises_loader_error(self, bundled_package):
        with pytest.raises(LoaderError):
            PackageResourceLoader().load_dictionary(f"{bundled_package}/locales", "fr")

    def test_unknown_package_raises_loader_error(self):
        with pytest.raises(LoaderError):
            PackageResourceLoader().load_dictionary("no_such_package_xyz", "en")


class TestHttpLoader:

    @staticmethod
    def _client(routes):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path in routes:
                return httpx.Response(200, content=routes[request.url.path])
            return httpx.Response(404)
        return httpx.Client(transport=httpx.MockTransport(handler))

    def test_fetches_language_file(self):
        client = self._client({"/i18n/en.json": b'{"greeting": "Hi"}'})
        data = HttpLoader(client=client).load_dictionary("https://cdn.test/i18n/", "en")
        assert data == {"greeting": "Hi"}

    def test_http_error_raises_loader_error(self):
        client = self._client({})
        with pytest.raises(LoaderError) as exc_info:
            HttpLoader(client=client).load_dictionary("https://cdn.test/i18n", "fr")
        assert exc_info.value.source == "https://cdn.test/i18n/fr.json"

    def test_malformed_body_raises_loader_error(self):
        client = self._client({"/i18n/en.json": b"<html>"})
        with pytest.raises(LoaderError):
            HttpLoader(client=client).load_dictionary("https://cdn.test/i18n", "en")


class TestLoaderForPath:

    def test_url_selects_http_loader(self):
        assert isinstance(loader_for_path("https://cdn.test/locales"), HttpLoader)

    def test_path_selects_file_system_loader(self):
        assert isinstance(loader_for_path("src/locales"), FileSystemLoader)
