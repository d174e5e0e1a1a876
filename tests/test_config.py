import unittest
from urllib.parse import parse_qs, urlsplit

from config import Config, ConfigError


class TestDatabaseUrl(unittest.TestCase):
    def test_libsql_url_uses_secure_libsql_dialect(self):
        url = Config.database_url("libsql://blog-demo.turso.io", "tok123")
        parts = urlsplit(url)
        self.assertEqual(parts.scheme, "sqlite+libsql")
        self.assertEqual(parts.netloc, "blog-demo.turso.io")
        query = parse_qs(parts.query)
        self.assertEqual(query["authToken"], ["tok123"])
        self.assertEqual(query["secure"], ["true"])

    def test_http_url_is_not_secure(self):
        url = Config.database_url("http://127.0.0.1:8080", "tok")
        self.assertEqual(parse_qs(urlsplit(url).query)["secure"], ["false"])

    def test_sqlite_url_passes_through(self):
        self.assertEqual(Config.database_url("sqlite:///blog.db", ""), "sqlite:///blog.db")

    def test_missing_url(self):
        with self.assertRaises(ConfigError):
            Config.database_url("", "tok")

    def test_missing_token_for_remote(self):
        with self.assertRaises(ConfigError):
            Config.database_url("libsql://blog-demo.turso.io", "")

    def test_unsupported_scheme(self):
        with self.assertRaises(ConfigError):
            Config.database_url("postgres://db.example.com/blog", "tok")


if __name__ == "__main__":
    unittest.main()
