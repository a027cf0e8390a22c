"""Generator, sampling primitives and the draw procedures built on them."""

from . import drivers, engine, europe, lcg, pool, routines, sampler, schemas, trains

__all__ = ["drivers", "engine", "europe", "lcg", "pool", "routines", "sampler", "schemas", "trains"]
