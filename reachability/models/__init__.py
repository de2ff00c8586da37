# [入口] 示例模型: 状态空间引擎的两个客户端

# reachability/models/__init__.py
from . import crossing
from . import family

__all__ = ["crossing", "family"]
