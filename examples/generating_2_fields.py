from flakeid import new2

if __name__ == "__main__":
    machine_id = 1
    process_id = 24
    sf = new2(machine_id, process_id)

    print(sf.next_id())

    # or
    print(new2(machine_id, process_id).next_id())
