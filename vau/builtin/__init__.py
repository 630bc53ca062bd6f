from vau.builtin.env_builtin import register, make_world, get_world
