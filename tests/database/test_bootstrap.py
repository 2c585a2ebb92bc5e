from src.attendance_tracker.attendance_tracker.database import bootstrap
from src.attendance_tracker.attendance_tracker.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE t (a INT);\n"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (a INT)"]


def test_semicolons_inside_quotes_do_not_split():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\")"
    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'INSERT INTO t VALUES ("c;d")']


def test_db_config_defaults():
    config = DBConfig.from_dict({"host": "db", "port": "3307"})
    assert (config.host, config.port, config.user, config.database) == ("db", 3307, "root", "attendance_tracker")


class _Cursor:
    def __init__(self, statements):
        self._statements = statements

    def execute(self, sql):
        self._statements.append(sql)


class _Connection:
    def __init__(self, statements):
        self._statements = statements
        self.committed = False

    def cursor(self):
        return _Cursor(self._statements)

    def commit(self):
        self.committed = True

    def close(self):
        pass


def test_apply_schema_accepts_str_path(tmp_path, monkeypatch):
    statements = []

    class FakeDatabaseConnection:
        def __init__(self, config):
            self.config = config

        def connect(self, *, with_database=True):
            return _Connection(statements)

    monkeypatch.setattr(bootstrap, "DatabaseConnection", FakeDatabaseConnection)
    schema = tmp_path / "schema.sql"
    schema.write_text("CREATE DATABASE x;\nUSE x;\nCREATE TABLE a (id INT);\nCREATE TABLE b (id INT);\n", encoding="utf-8")

    bootstrap.apply_schema({"database": "attendance"}, schema_path=str(schema))

    assert statements[0].startswith("CREATE DATABASE IF NOT EXISTS `attendance`")
    assert statements[1:] == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]
