from __future__ import annotations

from .schema import PolicyConfig, PolicyEntry

DEFAULT_SCHEMA = "public"
BANNER = "-- Generated by policygen"


def quote_ident(name: str) -> str:
    """Quote ``schema.table`` or ``table``; only the first dot separates."""
    return ".".join(_quote_part(part) for part in name.split(".", 1))


def split_schema_table(name: str) -> tuple[str, str]:
    if "." in name:
        schema, table = name.split(".", 1)
        return schema, table
    return DEFAULT_SCHEMA, name


def create_policy_sql(table_name: str, policy: PolicyEntry, action: str) -> str:
    """Guarded CREATE POLICY for one action.

    The guard is keyed on (schema, table, policy name) only, so for a policy
    with several actions just the first block creates anything.
    """
    role_clause = f" TO {policy.role}" if policy.role else ""
    using_clause = f" USING ({policy.using})" if policy.using else ""
    check_clause = f" WITH CHECK ({policy.check})" if policy.check else ""
    schema, table = split_schema_table(table_name)
    return "\n".join(
        [
            "DO $$",
            "BEGIN",
            "  IF NOT EXISTS (",
            "    SELECT 1 FROM pg_policies",
            f"    WHERE schemaname = {_literal(schema)}",
            f"      AND tablename = {_literal(table)}",
            f"      AND policyname = {_literal(policy.name)}",
            "  ) THEN",
            f"    CREATE POLICY {_quote_part(policy.name)} ON {quote_ident(table_name)}"
            f" FOR {action}{role_clause}{using_clause}{check_clause};",
            "  END IF;",
            "END$$;",
        ]
    )


def generate_sql(config: PolicyConfig) -> str:
    out: list[str] = [BANNER, "BEGIN;"]
    for table in config.tables:
        target = quote_ident(table.name)
        if table.enable_rls:
            out.append(f"ALTER TABLE {target} ENABLE ROW LEVEL SECURITY;")
        if table.force_rls:
            out.append(f"ALTER TABLE {target} FORCE ROW LEVEL SECURITY;")
        for policy in table.policies:
            for action in policy.actions:
                out.append(create_policy_sql(table.name, policy, action))
    out.append("COMMIT;")
    return "\n".join(out)


def _quote_part(part: str) -> str:
    return '"' + part.replace('"', '""') + '"'


def _literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"
