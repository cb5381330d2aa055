from pathlib import Path

from policygen.schema import PolicyConfig, PolicyEntry, TableConfig
from policygen.sql import create_policy_sql, generate_sql, quote_ident, split_schema_table
from policygen.validate import load_config, load_config_file


EXAMPLES_DIR = Path(__file__).parent.parent / "examples"

ROUND_TRIP = """
version: 1
tables:
  - name: blogs
    enable_rls: true
    force_rls: true
    policies:
      - name: p1
        actions: [select, insert]
        role: anon
        using: "true"
"""


def _config(*tables: TableConfig) -> PolicyConfig:
    return PolicyConfig(version=1, tables=list(tables))


def test_quote_ident():
    assert quote_ident("storage.objects") == '"storage"."objects"'
    assert quote_ident("blogs") == '"blogs"'
    assert quote_ident("a.b.c") == '"a"."b.c"'
    assert quote_ident('we"ird.t"bl') == '"we""ird"."t""bl"'


def test_split_schema_table():
    assert split_schema_table("storage.objects") == ("storage", "objects")
    assert split_schema_table("blogs") == ("public", "blogs")
    assert split_schema_table("a.b.c") == ("a", "b.c")


def test_round_trip_select_and_insert():
    sql = generate_sql(load_config(ROUND_TRIP))

    assert sql.count("ENABLE ROW LEVEL SECURITY") == 1
    assert sql.count("FORCE ROW LEVEL SECURITY") == 1
    assert 'CREATE POLICY "p1" ON "blogs" FOR select TO anon USING (true);' in sql
    assert 'CREATE POLICY "p1" ON "blogs" FOR insert TO anon USING (true);' in sql
    assert sql.count("WHERE schemaname = 'public'") == 2
    assert sql.count("AND tablename = 'blogs'") == 2
    assert sql.count("AND policyname = 'p1'") == 2


def test_create_policy_block_text():
    policy = PolicyEntry(name="read_all", actions=["select"], role="anon", using="true")
    assert create_policy_sql("storage.objects", policy, "select") == "\n".join(
        [
            "DO $$",
            "BEGIN",
            "  IF NOT EXISTS (",
            "    SELECT 1 FROM pg_policies",
            "    WHERE schemaname = 'storage'",
            "      AND tablename = 'objects'",
            "      AND policyname = 'read_all'",
            "  ) THEN",
            '    CREATE POLICY "read_all" ON "storage"."objects" FOR select TO anon USING (true);',
            "  END IF;",
            "END$$;",
        ]
    )


def test_optional_clauses_are_omitted():
    policy = PolicyEntry(name="own_rows", actions=["insert"], check="auth.uid() = author_id")
    block = create_policy_sql("blogs", policy, "insert")
    assert 'ON "blogs" FOR insert WITH CHECK (auth.uid() = author_id);' in block
    assert " TO " not in block
    assert "USING" not in block


def test_catalog_literals_escape_single_quotes():
    policy = PolicyEntry(name="o'brien", actions=["select"])
    block = create_policy_sql("blogs", policy, "select")
    assert "AND policyname = 'o''brien'" in block
    assert 'CREATE POLICY "o\'brien"' in block


def test_unqualified_table_defaults_schema_only_in_guard():
    sql = generate_sql(
        _config(
            TableConfig(
                name="blogs",
                enable_rls=True,
                policies=[PolicyEntry(name="p", actions=["select"])],
            )
        )
    )
    assert 'ALTER TABLE "blogs" ENABLE ROW LEVEL SECURITY;' in sql
    assert '"public"."blogs"' not in sql
    assert "WHERE schemaname = 'public'" in sql


def test_empty_policies_emit_toggles_only():
    sql = generate_sql(_config(TableConfig(name="storage.objects", enable_rls=True, force_rls=True)))
    assert sql.splitlines() == [
        "-- Generated by policygen",
        "BEGIN;",
        'ALTER TABLE "storage"."objects" ENABLE ROW LEVEL SECURITY;',
        'ALTER TABLE "storage"."objects" FORCE ROW LEVEL SECURITY;',
        "COMMIT;",
    ]


def test_empty_actions_emit_no_blocks():
    sql = generate_sql(
        _config(TableConfig(name="blogs", policies=[PolicyEntry(name="idle", actions=[])]))
    )
    assert "CREATE POLICY" not in sql
    assert sql.splitlines() == ["-- Generated by policygen", "BEGIN;", "COMMIT;"]


def test_force_is_emitted_without_enable():
    sql = generate_sql(_config(TableConfig(name="blogs", force_rls=True)))
    assert "FORCE ROW LEVEL SECURITY" in sql
    assert "ENABLE ROW LEVEL SECURITY" not in sql


def test_generation_is_deterministic():
    config = load_config(ROUND_TRIP)
    assert generate_sql(config) == generate_sql(config)
    assert generate_sql(load_config(ROUND_TRIP)) == generate_sql(config)


def test_example_config_end_to_end():
    sql = generate_sql(load_config_file(EXAMPLES_DIR / "policies.yaml"))
    lines = sql.splitlines()

    assert lines[0] == "-- Generated by policygen"
    assert lines[1] == "BEGIN;"
    assert lines[-1] == "COMMIT;"
    assert lines.count("BEGIN;") == 1
    assert lines.count("COMMIT;") == 1
    assert sql.count("ENABLE ROW LEVEL SECURITY") == 3
    assert sql.count("FORCE ROW LEVEL SECURITY") == 3
    assert sql.count("CREATE POLICY") == 6
    assert sql.count("FOR select TO anon") == 3
    assert sql.count("FOR select TO authenticated") == 3
    assert "IF NOT EXISTS" in sql
    assert 'ALTER TABLE "storage"."objects" ENABLE ROW LEVEL SECURITY;' in sql
    assert "USING (bucket_id = 'pictures')" in sql


def test_statement_order_follows_declaration_order():
    sql = generate_sql(load_config_file(EXAMPLES_DIR / "policies.yaml"))
    positions = [
        sql.index('ALTER TABLE "public"."blogs" ENABLE'),
        sql.index('ALTER TABLE "public"."blogs" FORCE'),
        sql.index('CREATE POLICY "blogs_public_read_anon"'),
        sql.index('CREATE POLICY "blogs_public_read_authenticated"'),
        sql.index('ALTER TABLE "public"."directus_files" ENABLE'),
        sql.index('CREATE POLICY "files_public_read_anon"'),
        sql.index('ALTER TABLE "storage"."objects" ENABLE'),
        sql.index('CREATE POLICY "pictures_bucket_read_authenticated"'),
    ]
    assert positions == sorted(positions)
