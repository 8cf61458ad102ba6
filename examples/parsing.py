from flakeid import parse

if __name__ == "__main__":
    parsed = parse(1292053924173320192)

    print(f"Timestamp: {parsed.timestamp}")  # 1640942460724
    print(f"Created at: {parsed.created_at.isoformat()}")
    print(f"Sequence: {parsed.sequence}")  # 0
    print(f"Machine ID: {parsed.discriminator}")  # 1
