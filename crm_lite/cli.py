"""Command-line front end for crm-lite.

Every command loads the session state from the data directory, runs one
operation and prints its result as JSON. Errors are printed as a one-line
notification on stderr with exit status 1; the stored data is unchanged.

Examples::

    crm-lite customers add --name Ann --phone 555-1 --address "1 Rd"
    crm-lite products update --total 100 --sold 25 --price 29.99 --capital 5000
    crm-lite report stats
    crm-lite export --output backups/
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import random
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from crm_lite import transfer
from crm_lite.config import CrmConfig
from crm_lite.diagnostics import run_self_test, system_info
from crm_lite.exceptions import CrmError, ValidationError
from crm_lite.generators import load_sample_data
from crm_lite.logging import get_logger, setup_logging
from crm_lite.reporting import ReportingEngine, customer_performance_report, financial_summary_report
from crm_lite.storage import JsonFileStore
from crm_lite.storage.serialization import customer_to_dict, serialize_value
from crm_lite.store import CustomerRepository, DomainState, ProductCounterAggregator, SettingsStore

logger = get_logger(__name__)


def _emit(value: Any) -> None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    print(json.dumps(serialize_value(value), indent=2, ensure_ascii=False))


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _customer_fields(args: argparse.Namespace) -> dict[str, Any]:
    names = ("name", "phone", "address", "email", "category", "notes")
    return {n: getattr(args, n) for n in names if getattr(args, n) is not None}


def _output_path(output: str | None, prefix: str) -> Path:
    """Use ``output`` as a file, or as a directory for a dated file name."""
    if output and not output.endswith(("/", "\\")) and Path(output).suffix:
        return Path(output)
    return Path(output or ".") / transfer.dated_filename(prefix, _now())


def cmd_customers(args: argparse.Namespace, state: DomainState) -> None:
    repo = CustomerRepository(state)
    if args.action == "list":
        _emit([customer_to_dict(c) for c in repo.all()])
    elif args.action == "show":
        _emit(customer_to_dict(repo.find_by_id(args.id)))
    elif args.action == "add":
        _emit(customer_to_dict(repo.add(_customer_fields(args))))
    elif args.action == "update":
        _emit(customer_to_dict(repo.update(args.id, _customer_fields(args))))
    elif args.action == "delete":
        repo.delete(args.id)
        print(f"Customer {args.id} deleted")
    elif args.action == "search":
        results = repo.search(args.field, args.query)
        print(f"Found {len(results)} customer(s) with {args.field}: \"{args.query}\"", file=sys.stderr)
        _emit([customer_to_dict(c) for c in results])
    elif args.action == "cleanup":
        removed = repo.purge_older_than(args.days)
        print(f"Cleanup completed. Removed {removed} old records.")


def cmd_products(args: argparse.Namespace, state: DomainState) -> None:
    aggregator = ProductCounterAggregator(state)
    if args.action == "update":
        aggregator.update(args.total, args.sold, args.price, args.capital)
    _emit({
        **aggregator.summary(),
        "price": aggregator.counters.price,
        "capital": aggregator.counters.capital,
        "revenue": aggregator.current_revenue(),
        "profit": aggregator.profit(),
        "roi": aggregator.roi(),
    })


def cmd_report(args: argparse.Namespace, state: DomainState, config: CrmConfig) -> None:
    engine = ReportingEngine(state, rng=random.Random(config.seed), config=config.reporting)
    if args.kind == "dashboard":
        _emit(engine.dashboard())
    elif args.kind == "stats":
        _emit(engine.quick_stats())
    elif args.kind == "categories":
        _emit([dataclasses.asdict(s) for s in engine.category_breakdown()])
    elif args.kind == "growth":
        _emit(engine.monthly_growth_series())
    elif args.kind == "sales":
        _emit(engine.monthly_sales_series())
    elif args.kind == "financial":
        _emit(engine.financial_report())
    elif args.kind == "products":
        _emit(engine.product_breakdown())
    elif args.kind in ("customer-export", "financial-export"):
        if args.kind == "customer-export":
            document, prefix = customer_performance_report(engine), "customer_performance_report"
        else:
            document, prefix = financial_summary_report(engine), "financial_summary_report"
        print(transfer.write_document(_output_path(args.output, prefix), document))


def cmd_settings(args: argparse.Namespace, state: DomainState) -> None:
    store = SettingsStore(state)
    if args.action == "show":
        _emit(store.load())
    elif args.action == "set":
        try:
            value = json.loads(args.value)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Section value must be a JSON object: {e}") from e
        _emit(store.patch(args.section, value))
    elif args.action == "reset":
        _emit(store.reset())
    elif args.action == "categories":
        _emit(store.categories())
    elif args.action == "add-category":
        _emit(store.add_category(args.name))
    elif args.action == "rename-category":
        _emit(store.rename_category(args.old_name, args.new_name))
    elif args.action == "remove-category":
        _emit(store.remove_category(args.name))


def cmd_data(args: argparse.Namespace, state: DomainState, config: CrmConfig) -> None:
    if args.command == "export":
        path = _output_path(args.output, "crm_data")
        print(transfer.write_document(path, transfer.export_data(state, _now())))
    elif args.command == "backup":
        SettingsStore(state).load()
        path = _output_path(args.output, "crm_backup")
        print(transfer.write_document(path, transfer.create_backup(state, _now())))
    elif args.command == "import":
        transfer.import_data(state, transfer.read_document(args.file))
        print("Data imported successfully!")
    elif args.command == "restore":
        transfer.restore_backup(state, transfer.read_document(args.file))
        print("Backup restored successfully!")
    elif args.command == "reset":
        if not args.yes:
            raise ValidationError("Reset erases all data and settings; pass --yes to confirm")
        transfer.reset_system(state)
        print("System reset successfully.")
    elif args.command == "sample":
        customers = load_sample_data(state, count=args.count, seed=config.seed)
        print(f"Generated {len(customers)} sample customers")
    elif args.command == "selftest":
        results = run_self_test(state.kv)
        _emit(results)
        print(f"System test completed: {sum(results.values())}/{len(results)} tests passed.", file=sys.stderr)
    elif args.command == "info":
        _emit(system_info(state.kv))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crm-lite",
        description="Track customers and product sales in local JSON files.",
    )
    parser.add_argument("--data-dir", type=str, default=None, help="Directory holding the data files")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: INFO)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for sample data and charts")
    sub = parser.add_subparsers(dest="command", required=True)

    customers = sub.add_parser("customers", help="Manage customers")
    cust_sub = customers.add_subparsers(dest="action", required=True)
    cust_sub.add_parser("list", help="List customers in insertion order")
    for name in ("show", "delete"):
        cust_sub.add_parser(name).add_argument("id")
    for name in ("add", "update"):
        p = cust_sub.add_parser(name)
        if name == "update":
            p.add_argument("id")
        for field in ("name", "phone", "address", "email", "category", "notes"):
            p.add_argument(f"--{field}", type=str, default=None)
    search = cust_sub.add_parser("search", help="Case-insensitive substring search")
    search.add_argument("field", choices=["name", "phone"])
    search.add_argument("query")
    cleanup = cust_sub.add_parser("cleanup", help="Remove customers older than N days")
    cleanup.add_argument("--days", type=int, required=True)

    products = sub.add_parser("products", help="Show or update product counters")
    prod_sub = products.add_subparsers(dest="action", required=True)
    prod_sub.add_parser("show")
    update = prod_sub.add_parser("update")
    update.add_argument("--total", type=int, required=True)
    update.add_argument("--sold", type=int, required=True)
    update.add_argument("--price", type=str, required=True)
    update.add_argument("--capital", type=str, required=True)

    report = sub.add_parser("report", help="Statistics and report documents")
    report.add_argument(
        "kind",
        choices=[
            "dashboard", "stats", "categories", "growth", "sales",
            "financial", "products", "customer-export", "financial-export",
        ],
    )
    report.add_argument("--output", type=str, default=None, help="File or directory for exports")

    settings = sub.add_parser("settings", help="View and edit settings")
    set_sub = settings.add_subparsers(dest="action", required=True)
    set_sub.add_parser("show")
    set_sub.add_parser("reset")
    set_sub.add_parser("categories")
    set_cmd = set_sub.add_parser("set", help="Replace a section with a JSON object")
    set_cmd.add_argument("section")
    set_cmd.add_argument("value")
    set_sub.add_parser("add-category").add_argument("name")
    set_sub.add_parser("remove-category").add_argument("name")
    rename = set_sub.add_parser("rename-category")
    rename.add_argument("old_name")
    rename.add_argument("new_name")

    for name in ("export", "backup"):
        sub.add_parser(name).add_argument("--output", type=str, default=None)
    for name in ("import", "restore"):
        sub.add_parser(name).add_argument("file")
    sub.add_parser("reset", help="Erase all data").add_argument("--yes", action="store_true")
    sub.add_parser("sample", help="Replace data with sample customers").add_argument(
        "--count", type=int, default=3
    )
    sub.add_parser("selftest", help="Check storage and data integrity")
    sub.add_parser("info", help="Record count and data size")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = CrmConfig.from_env()
    if args.data_dir:
        config.storage.data_dir = Path(args.data_dir)
    if args.log_level:
        config.log_level = args.log_level
    if args.seed is not None:
        config.seed = args.seed
    setup_logging(config.log_level, config.log_format)

    try:
        kv = JsonFileStore(config.storage.data_dir, pretty=config.storage.pretty_json)
        state = DomainState.load(kv)
        if args.command == "customers":
            cmd_customers(args, state)
        elif args.command == "products":
            cmd_products(args, state)
        elif args.command == "report":
            cmd_report(args, state, config)
        elif args.command == "settings":
            cmd_settings(args, state)
        else:
            cmd_data(args, state, config)
    except CrmError as e:
        logger.warning("%s failed: %s", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
