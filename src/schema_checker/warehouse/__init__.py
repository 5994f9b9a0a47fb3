"""
Colaboradores de warehouse.

`BigQueryWarehouse` depende do extra opcional `bigquery`
(google-cloud-bigquery); o import do cliente é feito sob demanda.
"""

from .base import Warehouse, WarehouseCreationError
from .bigquery import BigQueryWarehouse

__all__ = ["BigQueryWarehouse", "Warehouse", "WarehouseCreationError"]
