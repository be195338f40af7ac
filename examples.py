#!/usr/bin/env python3
"""
Examples of using the bow-tie generator.

Run this file to generate example diagrams as SVG files.
"""

from bowtie import BowtieGenerator


def example_chemical_spillage():
    """Chemical spillage at a storage site"""
    print("Example 1: Chemical Spillage")

    input_text = """
    title Chemical spillage
    event Spill of stored chemicals
    cause Valve failure
    cause Tank corrosion
    cause Operator error during transfer
    consequence Soil contamination
    consequence Toxic fumes
    consequence Fire
    barrier Inspection: Valve failure, Tank corrosion
    barrier Transfer checklist: Operator error during transfer
    barrier Training: Operator error during transfer
    barrier Bunding: Soil contamination
    barrier Gas detection: Toxic fumes, Fire
    barrier Evacuation plan: Toxic fumes, Fire
    """

    generator = BowtieGenerator()
    generator.save_svg(input_text, "chemical_spillage.svg")
    print("  Saved: chemical_spillage.svg\n")


def example_cyber_attacks():
    """Compromise of a company network"""
    print("Example 2: Cyber Attacks")

    input_text = """
    title Cyber attacks
    event Network compromised
    cause Phishing email
    cause Unpatched server
    cause Stolen credentials
    consequence Data breach
    consequence Ransomware outage
    barrier Awareness training: Phishing email
    barrier Mail filtering: Phishing email
    barrier Patch management: Unpatched server
    barrier MFA: Stolen credentials, Phishing email
    barrier Backups: Ransomware outage
    barrier Encryption at rest: Data breach
    barrier Incident response: Data breach, Ransomware outage
    """

    generator = BowtieGenerator()
    generator.save_svg(input_text, "cyber_attacks.svg")
    print("  Saved: cyber_attacks.svg\n")


def main():
    """Run all examples."""
    print("=" * 50)
    print("Bow-tie Generator Examples")
    print("=" * 50)
    print()

    example_chemical_spillage()
    example_cyber_attacks()

    print("=" * 50)
    print("All examples generated!")
    print("=" * 50)


if __name__ == "__main__":
    main()
