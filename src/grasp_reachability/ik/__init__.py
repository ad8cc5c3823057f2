"""Import classes and functions for solving inverse kinematics through external services."""

from .ik_client import ClosedFormIKClient as ClosedFormIKClient
from .ik_client import IKBackend as IKBackend
from .ik_client import IKClient as IKClient
from .ik_client import IKServiceUnavailableError as IKServiceUnavailableError
from .ik_client import IKSolution as IKSolution
from .ik_client import JointSpaceIKClient as JointSpaceIKClient
from .ik_client import create_ik_client as create_ik_client
from .ik_client import extract_joint_range as extract_joint_range
from .ik_service import NO_IK_SOLUTION as NO_IK_SOLUTION
from .ik_service import ClosedFormIKRequest as ClosedFormIKRequest
from .ik_service import ClosedFormIKResponse as ClosedFormIKResponse
from .ik_service import IKService as IKService
from .ik_service import JointSpaceIKRequest as JointSpaceIKRequest
from .ik_service import JointSpaceIKResponse as JointSpaceIKResponse
