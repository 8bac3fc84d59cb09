from lispy.builtin.env_builtin import BUILTINS, builtin_def, register
