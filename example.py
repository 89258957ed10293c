"""Example script demonstrating basic usage of quasirand."""

from quasirand import QuasiRandom, fixed_dimension, discrepancy


def main():
    """Print some points of a 2-dimensional sequence."""
    
    print("=" * 60)
    print("quasirand - Quick Example")
    print("=" * 60)
    print()
    
    # Create the generator
    num_dimensions = 2
    qrng = QuasiRandom(num_dimensions)
    
    # Generate and print out some points
    for _ in range(100):
        point = qrng.step()
        print("\t".join(f"{co:.6f}" for co in point))
    
    # Points can also be evaluated directly by index
    print()
    print(f"Point 500: {qrng.evaluate(500)}")
    
    # The dimension can be fixed per class when it is known ahead of time
    QuasiRandom3D = fixed_dimension(3)
    qrng3 = QuasiRandom3D(seed=0.25)
    print(f"First 3D point: {qrng3.step()}")
    
    # Uniformity of a larger sample
    sample = QuasiRandom(num_dimensions).random(1024)
    print(f"Centered discrepancy of 1024 points: {discrepancy(sample):.6f}")
    print()


if __name__ == '__main__':
    main()
