#!/usr/bin/env python3
"""
Demonstration of pyioc - a runtime dependency-resolution container.

This demo shows:
1. Class and factory bindings resolved by parameter name
2. Singletons and aliases
3. Instance overrides and parameter overrides
4. "name@method" calls with injected arguments
5. Cycle and missing-dependency errors
"""

import logging
import random
from dataclasses import dataclass

from pyioc import CircularDependencyError, ConstructibleNotFoundError, Container


@dataclass
class Config:
    """Application configuration."""

    app_name: str
    debug: bool = False


class PostgresDB:
    def __init__(self, connection_string):
        self.connection_string = connection_string

    def query(self, sql: str) -> str:
        return f"PostgreSQL[{self.connection_string}]: {sql}"


class Logger:
    def __init__(self, config):
        self.config = config
        self.session = random.randint(1000, 9999)

    def log(self, message: str) -> None:
        prefix = f"[{self.config.app_name}#{self.session}]"
        if self.config.debug:
            prefix += "[DEBUG]"
        print(f"{prefix} {message}")


class UserService:
    def __init__(self, database, logger):
        self.database = database
        self.logger = logger

    def create_user(self, username):
        self.logger.log(f"Creating user: {username}")
        return self.database.query(f"INSERT INTO users (name) VALUES ('{username}')")


def create_connection_string(config):
    """Factory function building the connection string from config."""
    if config.debug:
        return "postgresql://localhost:5432/testdb"
    return "postgresql://prod-server:5432/proddb"


def build_container() -> Container:
    container = Container()
    container.instance("config", Config("ProductionApp"))
    container.bind("connection_string", create_connection_string)
    container.singleton("database", PostgresDB)
    container.singleton("logger", Logger)
    container.bind("users", UserService)
    container.alias("database", "db")
    return container


def main():
    """Main demo function."""
    print("=== pyioc Demo ===\n")
    container = build_container()

    print("1. Resolving by parameter name:")
    print("-" * 30)
    users = container.make("users")
    print(f"Result: {users.create_user('alice')}")

    print("\n2. Singletons and aliases:")
    print("-" * 30)
    print(f"Same logger: {container.make('logger') is users.logger}")
    print(f"Alias 'db' is 'database': {container.make('db') is container.make('database')}")

    print("\n3. Overrides:")
    print("-" * 30)
    container.instance("config", Config("DebugApp", debug=True))
    print(f"Fresh connection string: {container.make('connection_string')}")
    print(f"Overridden username: {container.call('users@create_user', {'username': 'bob'})}")

    print("\n4. Calling functions with injection:")
    print("-" * 30)

    def summarize(config, db, limit):
        return f"{config.app_name} via {type(db).__name__}, limit {limit}"

    print(container.call(summarize, {"limit": 10}))

    print("\n5. Errors:")
    print("-" * 30)
    container.bind("a", "b")
    container.bind("b", "a")
    try:
        container.make("a")
    except CircularDependencyError as e:
        print(f"Caught expected circular dependency: {e}")

    container.bind("report", lambda missing_service: missing_service)
    try:
        container.make("report")
    except ConstructibleNotFoundError as e:
        print(f"Caught expected missing dependency: {e}")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
