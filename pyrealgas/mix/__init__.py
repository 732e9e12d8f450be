from .mix import average_params, average_params_mix, mix_dyn_params, mix_method_for
