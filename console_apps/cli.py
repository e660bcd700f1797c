import sys
from console_apps import create_atm, create_grade_calculator, create_session

def _run_until_done(build_program) -> int:
    try:
        build_program().run()
    except (KeyboardInterrupt, EOFError):
        # Ctrl-C or a closed stdin just ends the session
        print("\nGoodbye!")
    return 0


def number_game() -> int:
    return _run_until_done(create_session)


def atm() -> int:
    return _run_until_done(create_atm)


def grades() -> int:
    return _run_until_done(create_grade_calculator)


PROGRAMS = {'game': number_game, 'atm': atm, 'grades': grades}


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    program_name = argv[0] if argv else 'game'
    program = PROGRAMS.get(program_name)
    if program is None:
        print(f"Unknown program '{program_name}'. Choose one of: {', '.join(PROGRAMS)}")
        return 2
    return program()
