"""Routing — resolution outcomes and the resolver seam.

A resolver turns a synthetic request into match data or an error string;
``resolve_route`` captures that once as an immutable outcome.
"""
