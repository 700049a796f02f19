"""Resolver package for the GraphQL schema.

Resolvers read the request-scoped DataStore from ``info.context["store"]``
and convert store records into GraphQL types. They never mutate the store.
"""
