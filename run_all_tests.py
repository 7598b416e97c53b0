#!/usr/bin/env python3
"""
Comprehensive test runner for the scalargrad repository.

This script runs all tests across the engine and the classification
package and provides detailed reporting. Can be used locally or in CI
environments.
"""

import subprocess
import sys
import time


class TestRunner:
    """Orchestrates running all tests with proper reporting."""

    def __init__(self, verbose=True):
        self.verbose = verbose
        self.results = {}

    def log(self, message, level="INFO"):
        """Log message with timestamp."""
        if self.verbose:
            timestamp = time.strftime("%H:%M:%S")
            print(f"[{timestamp}] {level}: {message}")

    def run_command(self, command, cwd=None, description=""):
        """Run a command and capture output."""
        self.log(f"Running: {description or command}")

        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=300,  # 5 minute timeout
            )

            if result.returncode == 0:
                self.log(f"✅ {description or command} - PASSED")
                return True, result.stdout
            else:
                self.log(f"❌ {description or command} - FAILED")
                if self.verbose:
                    self.log(f"STDOUT: {result.stdout}")
                    self.log(f"STDERR: {result.stderr}")
                return False, result.stderr

        except subprocess.TimeoutExpired:
            self.log(f"⏰ {description or command} - TIMEOUT")
            return False, "Command timed out"
        except OSError as e:
            self.log(f"💥 {description or command} - ERROR: {e}")
            return False, str(e)

    def test_import_functionality(self):
        """Test that all modules can be imported successfully."""
        self.log("=" * 60)
        self.log("TESTING MODULE IMPORTS")
        self.log("=" * 60)

        import_tests = [
            (
                "Engine imports",
                "from scalargrad import Value, MLP, backward, topological_order; from scalargrad.visualize import draw_dot",
            ),
            (
                "Classification imports",
                "from classification.dataset import MoonsDataset; from classification.train import train_model; "
                "from classification.experiment import Experiment",
            ),
        ]

        all_passed = True
        for description, import_code in import_tests:
            success, output = self.run_command(
                f'{sys.executable} -c "{import_code}"', description=description
            )
            all_passed = all_passed and success

        self.results["imports"] = all_passed
        return all_passed

    def test_scalargrad_module(self):
        """Test the scalargrad engine comprehensively."""
        self.log("=" * 60)
        self.log("TESTING SCALARGRAD MODULE")
        self.log("=" * 60)

        # Test using custom test runner
        success1, output1 = self.run_command(
            f"{sys.executable} scalargrad/tests/run_tests.py", description="Scalargrad custom test suite"
        )

        # Test using pytest
        success2, output2 = self.run_command(
            f"{sys.executable} -m pytest scalargrad/tests/ -v", description="Scalargrad pytest suite"
        )

        # Test demo script execution
        success3, output3 = self.run_command(
            f"{sys.executable} -m scalargrad.main", description="Scalargrad demo script"
        )

        self.results["scalargrad"] = {
            "custom_tests": success1,
            "pytest": success2,
            "main_script": success3,
            "overall": success1 and success2 and success3,
        }

        return self.results["scalargrad"]["overall"]

    def test_classification_module(self):
        """Test classification module functionality."""
        self.log("=" * 60)
        self.log("TESTING CLASSIFICATION MODULE")
        self.log("=" * 60)

        success, output = self.run_command(
            f"{sys.executable} classification/tests/run_tests.py",
            description="Classification test suite",
        )

        self.results["classification"] = success
        return success

    def test_integration(self):
        """Test a short training run through the command line entry point."""
        self.log("=" * 60)
        self.log("TESTING CROSS-MODULE INTEGRATION")
        self.log("=" * 60)

        integration_test = (
            "import tempfile; "
            "from classification.main import main; "
            "d = tempfile.mkdtemp(); "
            "e = main(['--logs_dir', d, '--epochs', '5', '--num_samples', '20', "
            "'--layer_sizes', '4,1', '--fix_random_seed']); "
            "assert e.train_loss is not None, 'Training did not run'; "
            "print('✅ Cross-module integration test passed')"
        )

        success, output = self.run_command(
            f'{sys.executable} -c "{integration_test}"', description="Cross-module integration"
        )

        self.results["integration"] = success
        return success

    def run_all_tests(self):
        """Run comprehensive test suite."""
        self.log("🚀 Starting comprehensive test suite...")
        start_time = time.time()

        # Run all test categories
        test_results = [
            self.test_import_functionality(),
            self.test_scalargrad_module(),
            self.test_classification_module(),
            self.test_integration(),
        ]

        # Calculate results
        total_categories = len(test_results)
        passed_categories = sum(test_results)

        # Print summary
        elapsed_time = time.time() - start_time
        self.log("=" * 60)
        self.log("TEST SUMMARY")
        self.log("=" * 60)

        for category, result in self.results.items():
            if isinstance(result, dict):
                result = result["overall"]
            status = "✅ PASSED" if result else "❌ FAILED"
            self.log(f"{category.upper()}: {status}")

        self.log(f"\nOverall: {passed_categories}/{total_categories} categories passed")
        self.log(f"Execution time: {elapsed_time:.2f} seconds")

        if passed_categories == total_categories:
            self.log("🎉 ALL TESTS PASSED!")
            return True
        else:
            self.log("💥 SOME TESTS FAILED!")
            return False


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Run comprehensive test suite")
    parser.add_argument("--quiet", "-q", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--module",
        "-m",
        choices=["scalargrad", "classification", "imports", "integration"],
        help="Run tests for specific module only",
    )
    args = parser.parse_args()

    runner = TestRunner(verbose=not args.quiet)

    if args.module:
        # Run specific module tests
        if args.module == "scalargrad":
            success = runner.test_scalargrad_module()
        elif args.module == "classification":
            success = runner.test_classification_module()
        elif args.module == "imports":
            success = runner.test_import_functionality()
        elif args.module == "integration":
            success = runner.test_integration()
    else:
        # Run all tests
        success = runner.run_all_tests()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
