from sqlavro.adapters.base import VendorTypeMapping
from sqlavro.adapters.generic import GenericTypeMapping
from sqlavro.adapters.mysql import MySQLTypeMapping
from sqlavro.adapters.oracle import OracleTypeMapping


class AdapterRegistry:
    """
    Maps database vendor names to type mapping implementations.
    """

    _REGISTRY = {
        "GENERIC": GenericTypeMapping,
        "MYSQL": MySQLTypeMapping,
        "MARIADB": MySQLTypeMapping,
        "ORACLE": OracleTypeMapping,
    }

    @classmethod
    def get_mapping_class(cls, vendor: str):
        if not vendor:
            raise ValueError("Vendor name must not be empty")

        key = vendor.strip().upper()

        if key not in cls._REGISTRY:
            raise ValueError(
                f"No type mapping registered for vendor: {vendor}"
            )

        return cls._REGISTRY[key]

    @classmethod
    def get_mapping(cls, vendor: str, options) -> VendorTypeMapping:
        mapping_class = cls.get_mapping_class(vendor)
        return mapping_class(
            decimal_default_precision=options.decimal_default_precision,
            decimal_default_scale=options.decimal_default_scale,
        )
