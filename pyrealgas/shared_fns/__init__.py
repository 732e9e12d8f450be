from .shared_fns import convert_to_numpy, process_output, is_above0, cubic_roots, cubic_root
