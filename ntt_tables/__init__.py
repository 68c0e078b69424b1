"""NTT tables - precomputed constant tables for negacyclic NTT implementations."""

from ntt_tables.geometric import (
    inv_psi_power_table,
    power_table,
    psi_power_table,
    psi_power_tables,
    scaled_inv_psi_power_table,
)
from ntt_tables.level import build_shoup_table, level_slots, shoup_table, stage, stage_step
from ntt_tables.serialize import format_table, write_table, write_tables
from ntt_tables.table import Table, TableKind

__version__ = "0.1.0"
__all__ = [
    # Table
    "Table",
    "TableKind",
    # Geometric tables
    "power_table",
    "psi_power_table",
    "inv_psi_power_table",
    "scaled_inv_psi_power_table",
    "psi_power_tables",
    # Level table
    "level_slots",
    "stage_step",
    "build_shoup_table",
    "shoup_table",
    "stage",
    # Serialization
    "format_table",
    "write_table",
    "write_tables",
]
