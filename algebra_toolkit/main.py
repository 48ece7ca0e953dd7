"""
Algebra Toolkit - Main Entry Point

This script provides a unified interface to the toolkit's demos:
    1. Algebra contexts - the same operations over reals, complex numbers,
       Z_p and numpy arrays
    2. Polynomials - evaluation and polynomial-space arithmetic over any ring

Run with:
    python -m algebra_toolkit.main            # interactive menu
    python -m algebra_toolkit.main --quick    # run everything once and exit
    python -m algebra_toolkit.main --debug    # small prime, debug logging
"""

import sys
from typing import List, Optional

from algebra_toolkit.config import DemoConfig, create_debug_config, create_default_config
from algebra_toolkit.logging_config import setup_logging


def print_banner():
    """Print the toolkit banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 22 + "ALGEBRA TOOLKIT" + " " * 31 + "║")
    print("║" + " " * 68 + "║")
    print("║" + " " * 12 + "Generic operations and polynomials over rings" + " " * 11 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("This toolkit contains two demos:")
    print()
    print("  [1] Algebra Contexts")
    print("      sin, exp, sqrt, norm and named operations in several contexts")
    print("      → See how one function runs in different algebras")
    print()
    print("  [2] Polynomials")
    print("      Evaluate and combine polynomials over reals, Z_p and arrays")
    print("      → See PolynomialSpace arithmetic step by step")
    print()
    print("  [3] Quick Demo (both)")
    print()
    print("  [q] Quit")
    print()


def run_operations(config: DemoConfig):
    """Run the algebra contexts demo."""
    from algebra_toolkit.operations.demo import main as operations_main
    operations_main(config)


def run_polynomials(config: DemoConfig):
    """Run the polynomial demo."""
    from algebra_toolkit.functions.demo import main as polynomials_main
    polynomials_main(config)


def run_quick_demo(config: DemoConfig):
    """Run both demos back to back."""
    run_operations(config)
    run_polynomials(config)

    print("\n" + "=" * 70)
    print("QUICK DEMO COMPLETE")
    print("=" * 70)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    config = create_debug_config() if "--debug" in argv else create_default_config()
    setup_logging(config.logging_level)

    print_banner()

    if "--quick" in argv:
        run_quick_demo(config)
        return

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        if choice == '1':
            run_operations(config)
        elif choice == '2':
            run_polynomials(config)
        elif choice == '3':
            run_quick_demo(config)
        elif choice == 'q':
            print("\nGoodbye!")
            break
        else:
            print("\nInvalid choice. Please try again.")

        print()
        input("Press Enter to continue...")
        print("\n" * 2)


if __name__ == "__main__":
    main()
