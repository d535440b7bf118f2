"""
rotation
--------
Rotation representations: Euler angles (six axis orders) and quaternions.
"""

from rotation.euler import GIMBAL_LOCK_THRESHOLD, Euler, EulerOrder
from rotation.quaternion import Quaternion

__all__ = ["Euler", "EulerOrder", "Quaternion", "GIMBAL_LOCK_THRESHOLD"]
