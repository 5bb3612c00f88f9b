from deepread.workflow.machine import WorkflowStateMachine, build_workflow
from deepread.workflow.state import Idle, Processing, Ready, WorkflowState

__all__ = ["Idle", "Processing", "Ready", "WorkflowState", "WorkflowStateMachine", "build_workflow"]
