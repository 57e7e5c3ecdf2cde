"""Describes the Rescort domain. Centres around the search `Orchestrator`.

A search is two calls to a generation service: details for the dish, then a
photograph of it. The service is slow, costs money per call and can fail in
either step, so the interesting part is state: what the page shows while each
call is in flight, what survives a failure, and what happens to late answers
once the user has moved on to another dish.

The service itself sits behind the `Gateway` protocol so it can be faked.
"""
