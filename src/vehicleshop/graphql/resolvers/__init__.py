"""Resolver functions backing the GraphQL types, queries, and mutations."""
