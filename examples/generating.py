from flakeid import new

if __name__ == "__main__":
    machine_id = 1
    sf = new(machine_id)

    print(sf.next_id())

    # or
    print(new(machine_id).next_id())
