"""
Service layer for the KGB client.
"""

from kgb_client.services.rpc_service import RelayMethod, RpcService, ensure_success

__all__ = ["RelayMethod", "RpcService", "ensure_success"]
