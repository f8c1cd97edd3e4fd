from specdoc.batching.batch_builder import BatchBuilder, wrap_file

__all__ = ['BatchBuilder', 'wrap_file']
