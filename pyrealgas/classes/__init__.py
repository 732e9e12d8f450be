from .classes import eos_method, state_phase, mix_method, dyn_setup, gas_t, class_dic
