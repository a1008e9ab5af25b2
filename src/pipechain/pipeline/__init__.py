"""Pipeline – middleware bundles and the handler chain builder."""
from pipechain.pipeline.chain import PipeHandler, start
from pipechain.pipeline.pipeline import Pipeline, build

__all__ = ["PipeHandler", "Pipeline", "build", "start"]
