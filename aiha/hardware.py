# aiha/hardware.py
"""
Hardware description consumed by the resolver.

The values are produced by a host-introspection component that lives outside
this package; ``HardwareScanner`` only declares the interface it must satisfy.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field


class GpuDevice(BaseModel):
    name: str
    memory_bytes: int = 0
    compute_capability: Optional[str] = None


class HardwareProfile(BaseModel):
    os: str
    arch: str
    physical_cores: int = 0
    logical_cores: int = 0
    gpus: List[GpuDevice] = Field(default_factory=list)

    @property
    def gpu_count(self) -> int:
        return len(self.gpus)

    @property
    def total_gpu_memory_bytes(self) -> int:
        return sum(g.memory_bytes for g in self.gpus)


class HardwareScanner(ABC):
    @abstractmethod
    def scan(self) -> HardwareProfile:
        """Describe the machine this process runs on."""
