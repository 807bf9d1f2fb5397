from .descriptor import ProtocolDescriptor, ProtocolMatch

__all__ = ["ProtocolDescriptor", "ProtocolMatch"]
