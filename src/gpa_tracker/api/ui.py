"""Single-page browser client served by the API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Users and GPA calculator forms that consume the REST API."""
    return HTMLResponse(_CLIENT_HTML)


_CLIENT_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>GPA Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      nav button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .row { margin-bottom: 0.75rem; }
      input { padding: 0.4rem 0.6rem; margin-right: 0.5rem; }
      table { border-collapse: collapse; margin-top: 1rem; }
      td, th { border: 1px solid #ddd; padding: 0.3rem 0.6rem; }
      .hidden { display: none; }
      #message { color: #b00020; }
    </style>
  </head>
  <body>
    <h1>GPA Tracker</h1>
    <nav>
      <button onclick="show('users')">Users</button>
      <button onclick="show('calculator')">GPA Calculator</button>
    </nav>
    <p id="message"></p>

    <section id="users">
      <form id="user-form" class="row" onsubmit="saveUser(event)">
        <input id="user-name" placeholder="Name" required />
        <input id="user-email" type="email" placeholder="Email" required />
        <input id="user-age" type="number" min="0" placeholder="Age" required />
        <button id="user-submit">Add user</button>
      </form>
      <table><tbody id="user-rows"></tbody></table>
    </section>

    <section id="calculator" class="hidden">
      <form class="row" onsubmit="buildSubjects(event)">
        <input id="student" placeholder="Student name" required />
        <input id="university" placeholder="University" required />
        <input id="department" placeholder="Department" required />
        <input id="semester" placeholder="Semester" required />
        <input id="count" type="number" min="1" placeholder="Subjects" required />
        <button>Next</button>
      </form>
      <div id="subjects"></div>
      <button id="calculate" class="hidden" onclick="calculate()">Calculate</button>
      <div id="result"></div>
    </section>

    <script>
      let editingId = null;

      function show(view) {
        for (const id of ['users', 'calculator']) {
          document.getElementById(id).classList.toggle('hidden', id !== view);
        }
      }

      function say(text) {
        document.getElementById('message').textContent = text || '';
      }

      async function loadUsers() {
        const res = await fetch('/users');
        if (!res.ok) { say('Could not load users.'); return; }
        const rows = document.getElementById('user-rows');
        rows.innerHTML = '';
        for (const user of await res.json()) {
          const tr = document.createElement('tr');
          for (const value of [user.name, user.email, user.age]) {
            const td = document.createElement('td');
            td.textContent = value;
            tr.appendChild(td);
          }
          const actions = document.createElement('td');
          const edit = document.createElement('button');
          edit.textContent = 'Edit';
          edit.onclick = () => {
            editingId = user.id;
            document.getElementById('user-name').value = user.name;
            document.getElementById('user-email').value = user.email;
            document.getElementById('user-age').value = user.age;
            document.getElementById('user-submit').textContent = 'Update user';
          };
          const del = document.createElement('button');
          del.textContent = 'Delete';
          del.onclick = async () => {
            const r = await fetch('/users/' + user.id, { method: 'DELETE' });
            say(r.ok ? '' : 'Could not delete user.');
            loadUsers();
          };
          actions.append(edit, del);
          tr.appendChild(actions);
          rows.appendChild(tr);
        }
      }

      async function saveUser(event) {
        event.preventDefault();
        const body = {
          name: document.getElementById('user-name').value,
          email: document.getElementById('user-email').value,
          age: Number(document.getElementById('user-age').value),
        };
        const res = await fetch(editingId ? '/users/' + editingId : '/users', {
          method: editingId ? 'PUT' : 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body),
        });
        if (!res.ok) { say('Could not save user.'); return; }
        say('');
        editingId = null;
        event.target.reset();
        document.getElementById('user-submit').textContent = 'Add user';
        loadUsers();
      }

      function buildSubjects(event) {
        event.preventDefault();
        const count = Number(document.getElementById('count').value);
        const container = document.getElementById('subjects');
        container.innerHTML = '';
        for (let i = 0; i < count; i++) {
          const row = document.createElement('div');
          row.className = 'row subject';
          row.innerHTML = '<input placeholder="Subject name" class="s-name" />' +
            '<input type="number" step="any" placeholder="Credit hours" class="s-credit" />' +
            '<input type="number" step="any" placeholder="GPA" class="s-gpa" />';
          container.appendChild(row);
        }
        document.getElementById('calculate').classList.remove('hidden');
        document.getElementById('result').innerHTML = '';
      }

      function roundHalfUp(value) {
        const digits = Number(Math.abs(value).toPrecision(15));
        if (digits >= 1e15) return value;
        return Math.sign(value) * Number(Math.round(digits + 'e2') + 'e-2');
      }

      async function calculate() {
        const subjects = [];
        let points = 0, credits = 0;
        for (const row of document.querySelectorAll('.subject')) {
          const sub = {
            name: row.querySelector('.s-name').value.trim(),
            creditHours: parseFloat(row.querySelector('.s-credit').value),
            gpa: parseFloat(row.querySelector('.s-gpa').value),
          };
          if (!sub.name || isNaN(sub.creditHours) || isNaN(sub.gpa) || sub.creditHours <= 0) {
            say('Please fill all subject details correctly.');
            return;
          }
          credits += sub.creditHours;
          points += sub.creditHours * sub.gpa;
          subjects.push(sub);
        }
        const cgpa = roundHalfUp(points / credits);
        say('');
        const res = await fetch('/results', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            studentName: document.getElementById('student').value,
            universityName: document.getElementById('university').value,
            departmentName: document.getElementById('department').value,
            semester: document.getElementById('semester').value,
            totalSubjects: subjects.length,
            subjects,
            cgpa,
          }),
        });
        const result = document.getElementById('result');
        result.textContent = 'CGPA: ' + cgpa.toFixed(2) + ' ';
        if (!res.ok) { say('Calculated but failed to save to database.'); return; }
        const saved = await res.json();
        const link = document.createElement('a');
        link.href = '/results/' + saved.id + '/card.pdf';
        link.textContent = 'Download result card';
        result.appendChild(link);
      }

      loadUsers();
    </script>
  </body>
</html>
"""
