from nursery.seed.species_seed import DEFAULT_SPECIES, seed_catalog

__all__ = ["DEFAULT_SPECIES", "seed_catalog"]
