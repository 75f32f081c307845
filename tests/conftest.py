# tests/conftest.py
"""
Общие фикстуры: словари и исходники во временных директориях.
Сеть не используется - HTTP мокается через httpx.MockTransport.
"""
import json

import pytest


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def locales_dir(tmp_path):
    """en/fr/ru словари со строками и записями множественного числа."""
    root = tmp_path / "locales"
    write_json(root / "en.json", {
        "greeting": "Hello",
        "files": {"one": "{count} file", "other": "{count} files"},
        "apples": {"zero": "no apples", "one": "one apple", "other": "apples"},
        "broken": {"one": "only one"},
    })
    write_json(root / "fr.json", {
        "greeting": "Bonjour",
        "files": {"one": "{count} fichier", "other": "{count} fichiers"},
    })
    write_json(root / "ru.json", {
        "files": {
            "one": "{count} файл",
            "few": "{count} файла",
            "many": "{count} файлов",
            "other": "{count} файла",
        },
    })
    return root
