from quotes_gateway.database.memory import MemoryDatabase, MemoryUserBackend


class TestMemoryUserBackend:
    def test_insert_assigns_uid(self):
        backend = MemoryUserBackend(id_factory=lambda: 'uid-1')

        uid = backend.insert({'nickname': 'a'})

        assert uid == 'uid-1'
        assert backend.get('uid-1') == {'nickname': 'a', 'uid': 'uid-1'}

    def test_insert_does_not_mutate_argument(self):
        backend = MemoryUserBackend()
        record = {'nickname': 'a'}

        backend.insert(record)

        assert 'uid' not in record

    def test_returned_records_are_copies(self):
        backend = MemoryUserBackend()
        uid = backend.insert({'nickname': 'a', 'added': []})

        backend.get(uid)['added'].append('1')

        assert backend.get(uid)['added'] == []

    def test_fetch_by_nickname(self):
        backend = MemoryUserBackend()
        uid = backend.insert({'nickname': 'a'})

        assert backend.fetch('a')['uid'] == uid
        assert backend.fetch('b') is None

    def test_update_replaces_record(self):
        backend = MemoryUserBackend()
        uid = backend.insert({'nickname': 'a', 'email': 'x'})

        backend.update({'uid': uid, 'nickname': 'a'})

        assert backend.get(uid) == {'uid': uid, 'nickname': 'a'}
        assert len(backend.all()) == 1

    def test_update_keeps_position(self):
        backend = MemoryUserBackend()
        uid = backend.insert({'nickname': 'a'})
        backend.insert({'nickname': 'b'})

        backend.update({'uid': uid, 'nickname': 'c'})

        assert [r['nickname'] for r in backend.all()] == ['c', 'b']

    def test_all_in_insertion_order(self):
        backend = MemoryUserBackend()
        for nickname in ['a', 'b', 'c']:
            backend.insert({'nickname': nickname})

        assert [r['nickname'] for r in backend.all()] == ['a', 'b', 'c']

    def test_delete(self):
        backend = MemoryUserBackend()
        uid = backend.insert({'nickname': 'a'})

        backend.delete(uid)

        assert backend.get(uid) is None
        assert backend.all() == []


class TestMemoryDatabase:
    def test_users_share_storage(self):
        db = MemoryDatabase()
        uid = db.users.insert({'nickname': 'a'})

        assert db.users.get(uid)['nickname'] == 'a'

    def test_databases_are_isolated(self):
        MemoryDatabase().users.insert({'nickname': 'a'})

        assert MemoryDatabase().users.all() == []
