from shallow_attrs.interfaces.protocols import CoercionGatewayProtocol

__all__ = ["CoercionGatewayProtocol"]
