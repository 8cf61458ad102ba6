from flakeid import parse2

if __name__ == "__main__":
    parsed = parse2(1292065108376162304)

    print(f"Timestamp: {parsed.timestamp}")  # 1640945127245
    print(f"Created at: {parsed.created_at.isoformat()}")
    print(f"Sequence: {parsed.sequence}")  # 0
    print(f"Machine ID: {parsed.discriminator1}")  # 1
    print(f"Process ID: {parsed.discriminator2}")  # 24
