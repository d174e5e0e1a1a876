import os
import tempfile
import unittest

from repositories.database import Database


class TestDatabaseLifecycle(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.db = Database(f"sqlite:///{os.path.join(tmp.name, 'blog.db')}")

    def test_ping_after_init(self):
        self.db.init()
        self.addCleanup(self.db.dispose)
        self.db.ping()

    def test_use_before_init_raises(self):
        with self.assertRaises(RuntimeError):
            self.db.ping()
        with self.assertRaises(RuntimeError):
            self.db.get_session()

    def test_dispose_ends_lifecycle(self):
        self.db.init()
        self.db.dispose()

        with self.assertRaises(RuntimeError):
            self.db.ping()
        with self.assertRaises(RuntimeError):
            with self.db.session_ro():
                pass
        self.assertIsNone(self.db._engine)

    def test_init_is_idempotent(self):
        self.db.init()
        self.addCleanup(self.db.dispose)
        engine = self.db.engine
        self.db.init()
        self.assertIs(self.db.engine, engine)


if __name__ == "__main__":
    unittest.main()
